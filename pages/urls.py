from django.urls import path
from . import views

app_name = "pages"

urlpatterns = [
    path("", views.front_controller, name="home"),
    # Identifiers may also arrive as the path itself: /urn:lex::estatuto
    path("<path:uri>", views.front_controller, name="resolve"),
]
