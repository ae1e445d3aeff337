from django.apps import AppConfig


class MailboxesConfig(AppConfig):
    """Configuration for the mailboxes app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "mailboxes"
