from django.urls import include, path

urlpatterns = [
    path("api/", include("newsletter.urls")),
    # Front controller last: it takes every other path.
    path("", include("pages.urls")),
]
