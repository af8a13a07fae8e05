from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = _env_flag("DJANGO_DEBUG")
ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,addressforall.org").split(",")
    if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "pages",
    "newsletter",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "addressforall.urls"
WSGI_APPLICATION = "addressforall.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "pages.context_processors.site_chrome",
            ],
        },
    },
]

# No persistence: the site serves files and templates only.
DATABASES = {}

LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/resources/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# --- Documents served by urn:lex identifier ---------------------------------

# Artifact paths in LEX_DOCUMENTS_FILE are relative to this directory.
DOCUMENT_ROOT = Path(os.environ.get("A4A_DOCUMENT_ROOT", BASE_DIR))
LEX_DOCUMENTS_FILE = BASE_DIR / "pages" / "documents.yaml"

# --- Default page pipeline --------------------------------------------------

DEFAULT_PAGE = "local"
PAGE_TEMPLATES = {
    "local": "pages/default/local.html",
}

SITE_NAV = [
    {
        "title": "Address For All",
        "url": "#!",
        "children": [
            {"title": "Quem Somos", "url": "http://addressforall.org/quemsomos"},
            {"title": "Projetos", "url": "http://addressforall.org/projetos"},
            {"title": "Estatuto", "url": "http://addressforall.org/estatuto"},
        ],
    },
    {
        "title": "Dados & API",
        "url": "#!",
        "children": [
            {"title": "Dados", "url": "http://addressforall.org/dados"},
            {"title": "Serviços", "url": "http://addressforall.org/servicos"},
            {"title": "API", "url": "http://addressforall.org/api"},
        ],
    },
    {"title": "Ferramentas", "url": "http://addressforall.org/ferramentas"},
    {"title": "FAQ", "url": "http://addressforall.org/faq"},
    {"title": "Contribua", "url": "http://addressforall.org/contribua"},
    {"title": "Parceiros", "url": "http://addressforall.org/parceiros"},
    {
        "title": "Blog",
        "url": "https://medium.com/@thierryjean/my-diary-supporting-openstreetmap-and-mapillary-in-brazil-a6eb913eb695",
        "external": True,
    },
]

# --- Newsletter -------------------------------------------------------------

NEWSLETTER_API_URL = os.environ.get(
    "A4A_NEWSLETTER_API_URL",
    "http://api-test.addressforall.org/_sql/rpc/newsletter_email_ins",
)
NEWSLETTER_API_TIMEOUT = 10
# Sends the welcome e-mail after a new subscription; empty disables it.
NEWSLETTER_CONFIRM_URL = os.environ.get(
    "A4A_NEWSLETTER_CONFIRM_URL",
    "http://addressforall.org/default/email_enviar.inc.php",
)

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pages": {"handlers": ["console"], "level": os.environ.get("A4A_LOG_LEVEL", "INFO")},
        "newsletter": {"handlers": ["console"], "level": os.environ.get("A4A_LOG_LEVEL", "INFO")},
    },
}
