"""
Credential lookup and Stripe data fetching for customer emails.

The flow for one email is: find a conversation with that address,
follow it to its mailbox, load the mailbox's StripeSetting, decrypt the
secret key and hand it to a ``Stripe`` client for the read calls.

Absence anywhere along the way (unknown email, mailbox without a
setting) means "not configured": the secret key is ``""`` and the fetch
methods return ``False`` without building a client.  A stored key that
fails to decrypt raises ``CryptoError``.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from django.db import transaction

from mailboxes.models import Conversation, Mailbox
from .api import Stripe
from .conf import get_config
from .crypto import SecretBox, build_secret_box
from .models import StripeSetting

logger = logging.getLogger(__name__)


class StripeSettingRepository:
    """Reads the rows the lookup depends on."""

    def find_mailbox_id_for_email(self, email: str) -> Optional[int]:
        return (
            Conversation.objects.filter(customer_email__iexact=email.strip())
            .order_by("id")
            .values_list("mailbox_id", flat=True)
            .first()
        )

    def find_setting_by_mailbox(self, mailbox_id) -> Optional[StripeSetting]:
        return StripeSetting.objects.for_mailbox(mailbox_id)


def default_client_factory(api_key: str) -> Stripe:
    config = get_config()
    return Stripe(api_key, api_version=config["API_VERSION"], limit=config["LIST_LIMIT"])


class StripeCustomerData:
    """Resolve a customer email to Stripe invoices and subscriptions."""

    def __init__(
        self,
        repository: Optional[StripeSettingRepository] = None,
        secret_box: Optional[SecretBox] = None,
        client_factory: Callable[[str], Stripe] = default_client_factory,
    ):
        self.repository = repository or StripeSettingRepository()
        self.secret_box = secret_box or build_secret_box()
        self.client_factory = client_factory

    def get_stripe_secret_key(self, email: str) -> str:
        """Return the plaintext key for the mailbox ``email`` wrote to, or ''.

        Raises:
            CryptoError: the stored key cannot be decrypted.
        """
        if not email:
            return ""
        mailbox_id = self.repository.find_mailbox_id_for_email(email)
        if mailbox_id is None:
            logger.debug("No conversation found for customer email")
            return ""
        setting = self.repository.find_setting_by_mailbox(mailbox_id)
        if setting is None or not setting.stripe_secret_key:
            logger.debug("Mailbox %s has no Stripe key configured", mailbox_id)
            return ""
        return self.secret_box.decrypt(setting.stripe_secret_key)

    def get_stripe_invoices(self, email: str):
        stripe_secret = self.get_stripe_secret_key(email)
        if stripe_secret:
            return self.client_factory(stripe_secret).get_invoices(email)
        return False

    def get_stripe_subscriptions(self, email: str):
        stripe_secret = self.get_stripe_secret_key(email)
        if stripe_secret:
            return self.client_factory(stripe_secret).get_subscriptions(email)
        return False


@transaction.atomic
def save_secret_key(mailbox: Mailbox, plaintext: str, secret_box: Optional[SecretBox] = None) -> StripeSetting:
    """Encrypt ``plaintext`` and store it as the mailbox's Stripe key."""
    secret_box = secret_box or build_secret_box()
    setting, created = StripeSetting.objects.select_for_update().get_or_create(
        mailbox=mailbox,
        defaults={"stripe_secret_key": secret_box.encrypt(plaintext)},
    )
    if not created:
        setting.stripe_secret_key = secret_box.encrypt(plaintext)
        setting.save(update_fields=["stripe_secret_key", "updated_at"])
    logger.info("Stripe key %s for mailbox %s", "stored" if created else "replaced", mailbox.pk)
    return setting


def clear_secret_key(mailbox: Mailbox) -> bool:
    """Remove the mailbox's Stripe key.  Returns True if one existed."""
    deleted, _ = StripeSetting.objects.filter(mailbox=mailbox).delete()
    if deleted:
        logger.info("Stripe key removed for mailbox %s", mailbox.pk)
    return bool(deleted)
