"""
Views for the Stripe integration app.

Staff configure each mailbox's Stripe secret key here: a REST endpoint
(`/api/mailboxes/<id>/stripe/`) and the settings screen linked from the
mailbox settings menu, which drives that endpoint from `stripe.js`.
"""
from __future__ import annotations

import logging

from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import get_object_or_404, render
from rest_framework import permissions, status, views
from rest_framework.response import Response

from mailboxes.models import Mailbox
from .crypto import CryptoError, build_secret_box
from .models import StripeSetting
from .serializers import StripeSecretKeySerializer, StripeSettingStatusSerializer
from .services import clear_secret_key, save_secret_key

logger = logging.getLogger(__name__)


def setting_status(mailbox: Mailbox) -> dict:
    setting = StripeSetting.objects.for_mailbox(mailbox.pk)
    data = {
        "mailbox_id": mailbox.pk,
        "connected": setting is not None,
        "key_hint": None,
        "updated_at": setting.updated_at if setting else None,
    }
    if setting is not None:
        try:
            data["key_hint"] = "…" + build_secret_box().decrypt(setting.stripe_secret_key)[-4:]
        except CryptoError:
            logger.warning("Stripe key for mailbox %s could not be decrypted", mailbox.pk)
            data["error"] = "Stored key could not be decrypted. Save the key again."
    return data


class MailboxStripeSettingView(views.APIView):
    """Show, set or remove the Stripe secret key of a mailbox."""

    permission_classes = [permissions.IsAdminUser]
    serializer_class = StripeSecretKeySerializer

    def get(self, request, mailbox_id):
        mailbox = get_object_or_404(Mailbox, pk=mailbox_id)
        return Response(StripeSettingStatusSerializer(setting_status(mailbox)).data)

    def put(self, request, mailbox_id):
        mailbox = get_object_or_404(Mailbox, pk=mailbox_id)
        serializer = StripeSecretKeySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        save_secret_key(mailbox, serializer.validated_data["stripe_secret_key"])
        return Response(StripeSettingStatusSerializer(setting_status(mailbox)).data)

    def delete(self, request, mailbox_id):
        mailbox = get_object_or_404(Mailbox, pk=mailbox_id)
        clear_secret_key(mailbox)
        return Response(status=status.HTTP_204_NO_CONTENT)


@staff_member_required
def mailbox_stripe_settings(request, mailbox_id):
    mailbox = get_object_or_404(Mailbox, pk=mailbox_id)
    return render(request, "stripe/settings.html", {
        "mailbox": mailbox,
        "status": setting_status(mailbox),
    })
