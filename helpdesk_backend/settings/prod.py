"""
Production settings for the helpdesk backend.

Extends the base settings by disabling debug mode, enforcing secure
cookies, and enabling HTTP Strict Transport Security.  A dedicated
encryption key for stored Stripe credentials is mandatory here.
"""
import os

from .base import *  # noqa

DEBUG = False

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = True

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

STRIPE_INTEGRATION["ENCRYPTION_KEY"] = os.environ["STRIPE_ENCRYPTION_KEY"]  # noqa: F405
