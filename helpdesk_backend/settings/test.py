"""
Test settings for the helpdesk backend.

Runs against an in-memory SQLite database with a fixed Fernet key so
stored Stripe credentials can be encrypted and decrypted in tests.
"""
from .base import *  # noqa

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "DEFAULT_THROTTLE_CLASSES": [],
}

STRIPE_INTEGRATION = {
    "ENCRYPTION_KEY": "k8Qz5yJwlEJx6hF0yq0nC8r8d1kU6r9iY1o3oQmQ3uU=",
    "API_VERSION": None,
    "LIST_LIMIT": 10,
}
