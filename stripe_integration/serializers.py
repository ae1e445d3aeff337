"""
Serializers for the Stripe integration app.

The secret key is write-only.  Responses only ever carry whether a key
is configured and a short hint of its last characters.
"""
from __future__ import annotations

from rest_framework import serializers

KEY_PREFIXES = ("sk_", "rk_")


class StripeSecretKeySerializer(serializers.Serializer):
    """Validates a Stripe secret (sk_) or restricted (rk_) key."""

    stripe_secret_key = serializers.CharField(write_only=True, trim_whitespace=True, max_length=255)

    def validate_stripe_secret_key(self, value: str) -> str:
        if not value.startswith(KEY_PREFIXES):
            raise serializers.ValidationError("Expected a Stripe secret key starting with sk_ or rk_.")
        if any(ch.isspace() for ch in value):
            raise serializers.ValidationError("Stripe keys cannot contain whitespace.")
        return value


class StripeSettingStatusSerializer(serializers.Serializer):
    """Read-only status of a mailbox's Stripe configuration."""

    mailbox_id = serializers.IntegerField()
    connected = serializers.BooleanField()
    key_hint = serializers.CharField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)
    error = serializers.CharField(required=False)
