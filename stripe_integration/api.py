"""
Read-only Stripe client scoped to one secret key.

Every request passes the key explicitly (``api_key=``) so different
mailboxes can use different Stripe accounts within one process; the
global ``stripe.api_key`` is never touched.  Nothing is cached between
calls and failed calls are not retried.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import stripe

logger = logging.getLogger(__name__)


class Stripe:
    """Fetch invoices and subscriptions for a customer email."""

    def __init__(self, api_key: str, *, api_version: Optional[str] = None, limit: int = 20):
        self.api_key = api_key
        self.api_version = api_version
        self.limit = limit

    def _request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"api_key": self.api_key}
        if self.api_version:
            options["stripe_version"] = self.api_version
        return options

    def get_customers(self, email: str) -> list:
        result = stripe.Customer.list(email=email, limit=self.limit, **self._request_options())
        return list(result["data"])

    def get_invoices(self, email: str):
        """Return ``[{"invoice": ..., "products": [...]}]`` billed to ``email``.

        Returns False when no key is set or the Stripe call fails.
        """
        if not self.api_key:
            return False
        try:
            product_with_invoices = []
            for customer in self.get_customers(email):
                invoices = stripe.Invoice.list(
                    customer=customer["id"], limit=self.limit, **self._request_options()
                )
                for invoice in invoices["data"]:
                    product_with_invoices.append({
                        "invoice": invoice,
                        "products": _line_descriptions(invoice),
                    })
            return product_with_invoices
        except stripe.StripeError as exc:
            logger.warning("Stripe invoice lookup failed: %s", _describe(exc))
            return False

    def get_subscriptions(self, email: str):
        """Return ``[{"subscription": ..., "products": [...], "renews_at": ...}]``.

        ``renews_at`` is the current period end as a unix timestamp, or None.
        Includes every status (active, past due, canceled, ...).
        Returns False when no key is set or the Stripe call fails.
        """
        if not self.api_key:
            return False
        try:
            product_names: dict[str, str] = {}
            product_with_subscriptions = []
            for customer in self.get_customers(email):
                subscriptions = stripe.Subscription.list(
                    customer=customer["id"], status="all", limit=self.limit, **self._request_options()
                )
                for subscription in subscriptions["data"]:
                    product_with_subscriptions.append({
                        "subscription": subscription,
                        "products": self._item_products(subscription, product_names),
                        "renews_at": _renews_at(subscription),
                    })
            return product_with_subscriptions
        except stripe.StripeError as exc:
            logger.warning("Stripe subscription lookup failed: %s", _describe(exc))
            return False

    def _item_products(self, subscription, product_names: dict[str, str]) -> list[str]:
        names = []
        for item in _list_data(subscription, "items"):
            product = _field(_field(item, "price"), "product")
            if not product:
                continue
            if not isinstance(product, str):
                # already expanded
                names.append(_field(product, "name") or product["id"])
                continue
            if product not in product_names:
                obj = stripe.Product.retrieve(product, **self._request_options())
                product_names[product] = _field(obj, "name") or product
            names.append(product_names[product])
        return names


def _field(obj, key: str):
    # SDK objects support subscript and ``in`` but not dict.get()
    if obj is None or key not in obj:
        return None
    return obj[key]


def _list_data(obj, key: str) -> list:
    return list(_field(_field(obj, key), "data") or [])


def _line_descriptions(invoice) -> list[str]:
    descriptions = []
    for line in _list_data(invoice, "lines"):
        description = _field(line, "description")
        if description:
            descriptions.append(description)
    return descriptions


def _renews_at(subscription) -> Optional[int]:
    # Newer API versions only carry the period end on the subscription items
    period_end = _field(subscription, "current_period_end")
    if period_end:
        return period_end
    for item in _list_data(subscription, "items"):
        period_end = _field(item, "current_period_end")
        if period_end:
            return period_end
    return None


def _describe(exc: stripe.StripeError) -> str:
    # Error messages from Stripe can echo the key prefix; log type and code only
    return f"{type(exc).__name__} (code={getattr(exc, 'code', None)}, status={getattr(exc, 'http_status', None)})"
