"""
Database models for the Stripe integration app.

One StripeSetting row per mailbox holds that mailbox's Stripe secret
key, encrypted with ``crypto.SecretBox``.  The plaintext key is never
stored; it is decrypted per request by ``services.StripeCustomerData``.
"""
from __future__ import annotations

from typing import Optional

from django.db import models

from mailboxes.models import Mailbox


class StripeSettingManager(models.Manager):
    def for_mailbox(self, mailbox_id) -> Optional["StripeSetting"]:
        """Return the setting for ``mailbox_id`` or None."""
        return self.filter(mailbox_id=mailbox_id).first()


class StripeSetting(models.Model):
    """Per-mailbox Stripe configuration."""

    mailbox = models.OneToOneField(
        Mailbox,
        on_delete=models.CASCADE,
        related_name="stripe_setting",
    )
    stripe_secret_key = models.TextField(
        help_text="Fernet ciphertext of the mailbox's Stripe secret key",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = StripeSettingManager()

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self) -> str:
        return f"StripeSetting(mailbox={self.mailbox_id})"
