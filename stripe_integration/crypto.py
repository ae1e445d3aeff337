"""
Encryption of stored Stripe secret keys.

Secret keys are encrypted with Fernet (AES-128-CBC + HMAC-SHA256) under
a single process-wide key.  ``SecretBox`` is handed that key explicitly;
``build_secret_box`` reads it from the module configuration.
"""
from __future__ import annotations

import base64
import hashlib
import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .conf import get_config

logger = logging.getLogger(__name__)


class CryptoError(Exception):
    """Raised when a stored secret cannot be decrypted or encrypted."""


class SecretBox:
    """Symmetric encryption of short secrets with a fixed Fernet key."""

    def __init__(self, key: bytes | str):
        try:
            self._fernet = Fernet(key)
        except (ValueError, TypeError) as exc:
            raise CryptoError("Invalid encryption key") from exc

    def encrypt(self, plaintext: str) -> str:
        try:
            return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")
        except (AttributeError, TypeError) as exc:
            raise CryptoError("Secret must be a string") from exc

    def decrypt(self, ciphertext: str) -> str:
        """Return the plaintext for ``ciphertext``.

        Raises:
            CryptoError: the token is malformed, was tampered with, or was
                encrypted under a different key.
        """
        try:
            token = ciphertext.encode("ascii")
            return self._fernet.decrypt(token).decode("utf-8")
        except (InvalidToken, UnicodeError, AttributeError, TypeError) as exc:
            raise CryptoError("Unable to decrypt stored secret") from exc


def derive_key(secret: str) -> bytes:
    """Derive a Fernet key from an arbitrary string (e.g. Django's SECRET_KEY)."""
    digest = hashlib.sha256(f"stripe_integration:{secret}".encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest)


def build_secret_box(key: Optional[str] = None) -> SecretBox:
    """Build a SecretBox from ``key`` or the configured encryption key."""
    if key is None:
        key = get_config()["ENCRYPTION_KEY"]
    if not key:
        logger.debug("STRIPE_INTEGRATION['ENCRYPTION_KEY'] not set; deriving from SECRET_KEY")
        key = derive_key(settings.SECRET_KEY)
    try:
        return SecretBox(key)
    except CryptoError as exc:
        raise ImproperlyConfigured(
            "STRIPE_INTEGRATION['ENCRYPTION_KEY'] must be a 32-byte url-safe base64 Fernet key."
        ) from exc
