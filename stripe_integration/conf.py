"""
Module configuration for the Stripe integration.

Values in ``settings.STRIPE_INTEGRATION`` are merged over ``DEFAULTS``.
"""
from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Alias the module's templates and static files live under
    "MODULE_ALIAS": "stripe",
    "STYLESHEET": "stripe/css/stripe.css",
    "JAVASCRIPT": "stripe/js/stripe.js",
    # Fernet key for stored secret keys; derived from SECRET_KEY when empty
    "ENCRYPTION_KEY": "",
    "API_VERSION": None,
    "LIST_LIMIT": 20,
}


def get_config() -> dict[str, Any]:
    return {**DEFAULTS, **getattr(settings, "STRIPE_INTEGRATION", {})}
