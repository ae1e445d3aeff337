"""
Initial migration for the Stripe integration app.

Creates the StripeSetting table.  The one-to-one link to Mailbox keeps
at most one setting per mailbox.
"""
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("mailboxes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="StripeSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "stripe_secret_key",
                    models.TextField(help_text="Fernet ciphertext of the mailbox's Stripe secret key"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "mailbox",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stripe_setting",
                        to="mailboxes.mailbox",
                    ),
                ),
            ],
            options={"ordering": ["-updated_at"]},
        ),
    ]
