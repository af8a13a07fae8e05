from django.urls import reverse

from .nav import build_nav_tree


def site_chrome(request):
    return {
        "site_nav_tree": build_nav_tree(),
        "site_license": {
            "label": "Licença Aberta",
            "href": "http://opendefinition.org/od/2.1/pt-br/",
            "logo": "https://upload.wikimedia.org/wikipedia/commons/a/ab/Open_Definition_logo.png",
        },
        "newsletter_url": reverse("newsletter:subscribe"),
    }
