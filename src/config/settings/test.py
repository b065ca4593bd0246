"""
Django test settings for the information form web application.
"""

from .base import *  # noqa: F403
from .base import env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use fast password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Use DATABASE_URL if set (Docker), otherwise an in-memory SQLite database
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite://:memory:"),
}

CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "infoform-tests"},
}

ADMIN_NOTIFICATION_EMAIL = "admin@example.com"
GOOGLE_SHEETS_URL = ""
SHEETS_WEBHOOK_TIMEOUT = 2
SIDE_EFFECT_TIMEOUT = 5

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
