"""
Formatting filters for Stripe objects in templates.

Usage::

    {% load stripe_tags %}
    {{ invoice.amount_due|stripe_amount:invoice.currency }}
    {{ invoice.created|stripe_date|date:"M j, Y" }}
"""
from datetime import datetime, timezone
from decimal import Decimal

from django import template

register = template.Library()

# Currencies Stripe bills in whole units
ZERO_DECIMAL_CURRENCIES = frozenset({
    "bif", "clp", "djf", "gnf", "jpy", "kmf", "krw", "mga",
    "pyg", "rwf", "ugx", "vnd", "vuv", "xaf", "xof", "xpf",
})

# Currencies with three minor-unit digits
THREE_DECIMAL_CURRENCIES = frozenset({"bhd", "jod", "kwd", "omr", "tnd"})


@register.filter
def stripe_amount(value, currency=""):
    """Format an amount in minor units, e.g. 1234 + 'usd' -> '12.34 USD'."""
    if value in (None, ""):
        return ""
    code = (currency or "").lower()
    if code in ZERO_DECIMAL_CURRENCIES:
        amount = f"{int(value)}"
    elif code in THREE_DECIMAL_CURRENCIES:
        amount = f"{Decimal(int(value)) / 1000:.3f}"
    else:
        amount = f"{Decimal(int(value)) / 100:.2f}"
    return f"{amount} {code.upper()}".strip()


@register.filter
def stripe_date(value):
    """Convert a unix timestamp to an aware datetime."""
    if value in (None, ""):
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)
