"""
URL configuration for the Stripe integration app.

Include this module at the project root: it serves the settings API
under ``/api/`` and the settings screen under ``/mailboxes/``.
"""
from django.urls import path

from .views import MailboxStripeSettingView, mailbox_stripe_settings

app_name = "stripe"

urlpatterns = [
    path("api/mailboxes/<int:mailbox_id>/stripe/", MailboxStripeSettingView.as_view(), name="settings-api"),
    path("mailboxes/<int:mailbox_id>/stripe/", mailbox_stripe_settings, name="settings"),
]
