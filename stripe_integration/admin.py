"""
Django admin configuration for the Stripe integration app.

The ciphertext column is never displayed; staff set or replace a key
through the plain-text form field, which is encrypted before saving.
"""
from django import forms
from django.contrib import admin

from .crypto import build_secret_box
from .models import StripeSetting


class StripeSettingForm(forms.ModelForm):
    secret_key = forms.CharField(
        label="Stripe secret key",
        widget=forms.PasswordInput(render_value=False),
        required=False,
        help_text="Leave blank to keep the current key.",
    )

    class Meta:
        model = StripeSetting
        fields = ("mailbox",)

    def clean(self):
        cleaned = super().clean()
        if not self.instance.pk and not cleaned.get("secret_key"):
            self.add_error("secret_key", "A secret key is required.")
        return cleaned

    def save(self, commit=True):
        secret = self.cleaned_data.get("secret_key")
        if secret:
            self.instance.stripe_secret_key = build_secret_box().encrypt(secret.strip())
        return super().save(commit=commit)


@admin.register(StripeSetting)
class StripeSettingAdmin(admin.ModelAdmin):
    form = StripeSettingForm
    list_display = ("mailbox", "created_at", "updated_at")
    search_fields = ("mailbox__name", "mailbox__email")
    ordering = ("-updated_at",)
