"""
URL configuration for the mailboxes app.

Include this module under ``/mailboxes/`` at the project level.
"""
from django.urls import path

from . import views

app_name = "mailboxes"

urlpatterns = [
    path("", views.mailbox_list, name="mailbox-list"),
    path("<int:pk>/settings/", views.mailbox_settings, name="mailbox-settings"),
    path("customers/<int:pk>/", views.customer_profile, name="customer-profile"),
]
