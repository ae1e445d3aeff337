"""
Hooks the Stripe integration registers into the host.

* ``stylesheets`` / ``javascripts`` filters add the module's assets.
* ``customer.profile.extra`` renders the customer's Stripe invoices and
  subscriptions on the profile screen.
* ``mailboxes.settings.menu`` renders a link to the module's settings
  screen for the mailbox.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from django.template.loader import render_to_string
from django.templatetags.static import static

from common.hooks import HookRegistry
from .conf import get_config
from .crypto import CryptoError
from .services import StripeCustomerData

logger = logging.getLogger(__name__)


class StripeServiceProvider:
    """Registers the module's filters and actions into a HookRegistry."""

    def __init__(
        self,
        registry: HookRegistry,
        service: Optional[StripeCustomerData] = None,
        config: Optional[dict[str, Any]] = None,
    ):
        self.registry = registry
        self._service = service
        self.config = config or get_config()

    @property
    def service(self) -> StripeCustomerData:
        # Built on first use; building reads the encryption key
        if self._service is None:
            self._service = StripeCustomerData()
        return self._service

    def template_name(self, name: str) -> str:
        return f"{self.config['MODULE_ALIAS']}/{name}.html"

    def hooks(self) -> None:
        self.registry.add_filter("stylesheets", self.add_stylesheet)
        self.registry.add_action("customer.profile.extra", self.customer_profile_extra)
        self.registry.add_action("mailboxes.settings.menu", self.mailbox_settings_menu)
        self.registry.add_filter("javascripts", self.add_javascript)

    def add_stylesheet(self, styles):
        return [*styles, static(self.config["STYLESHEET"])]

    def add_javascript(self, javascripts):
        return [*javascripts, static(self.config["JAVASCRIPT"])]

    def customer_profile_extra(self, customer) -> str:
        """Render the customer's invoices and subscriptions."""
        email = customer.get_main_email()
        product_with_invoices = product_with_subscriptions = False
        stripe_error = False
        try:
            product_with_invoices = self.service.get_stripe_invoices(email)
            product_with_subscriptions = self.service.get_stripe_subscriptions(email)
        except CryptoError:
            logger.exception("Stored Stripe key for customer %s could not be decrypted", customer.pk)
            stripe_error = True

        return render_to_string(self.template_name("customer_fields_view"), {
            "customer": customer,
            "email": email,
            "productWithInvoices": product_with_invoices,
            "productWithSubscriptions": product_with_subscriptions,
            "stripe_error": stripe_error,
        })

    def mailbox_settings_menu(self, mailbox) -> str:
        return render_to_string(self.template_name("mailbox_settings_menu"), {
            "mailbox": mailbox,
        })
