"""
Django settings for the core project.

Values come from the environment (a local .env file is loaded first).
For the full list of settings and their values, see
https://docs.djangoproject.com/en/5.2/ref/settings/
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-dev-only-key")
DEBUG = _env_bool("DEBUG", "true")
ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")


INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "config.dictionaries",
    "config.system_config",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Internationalization

LANGUAGE_CODE = "en"

# Locales offered in the UI: (code, title)
LANGUAGES = [
    ("en", "English"),
    ("ar", "Arabic"),
    ("es", "Español"),
    ("fa", "Persian"),
    ("pt-br", "Portuguese"),
    ("tr", "Türkçe"),
    ("vi", "Vietnamese"),
]

TIME_ZONE = os.getenv("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

# ISO 4217 code used when rendering prices
BASE_CURRENCY = os.getenv("BASE_CURRENCY", "USD").strip().upper()

STATIC_URL = "static/"


REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
}


# Configuration fields editable from the admin area.
# Stored values live in system_config.CoreConfig keyed by "<key>.<field name>".
SYSTEM_CONFIG = [
    {
        "key": "general.general.locale_settings",
        "name": "Locale settings",
        "fields": [
            {
                "name": "locale",
                "title": "Default locale",
                "type": "select",
                "default": LANGUAGE_CODE,
                "options": [code for code, _title in LANGUAGES],
            },
            {
                "name": "timezone",
                "title": "Default timezone",
                "type": "select",
                "default": TIME_ZONE,
            },
        ],
    },
    {
        "key": "general.general.admin_logo",
        "name": "Admin logo",
        "fields": [
            {
                "name": "logo_image",
                "title": "Logo image",
                "type": "image",
                "default": None,
            },
        ],
    },
    {
        "key": "email.smtp.account",
        "name": "SMTP account",
        "fields": [
            {
                "name": "from_name",
                "title": "Sender name",
                "type": "text",
                "default": "CRM",
            },
            {
                "name": "from_address",
                "title": "Sender address",
                "type": "text",
                "default": "noreply@example.com",
            },
        ],
    },
]


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "core": {
            "handlers": ["console"],
            "level": os.getenv("LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "config": {
            "handlers": ["console"],
            "level": os.getenv("LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
