"""
Tests for the StripeSetting admin form, which encrypts keys on save.
"""
import pytest

from stripe_integration.admin import StripeSettingForm
from stripe_integration.models import StripeSetting


@pytest.mark.django_db
def test_admin_form_encrypts_new_key(mailbox, secret_box):
    form = StripeSettingForm(data={"mailbox": mailbox.pk, "secret_key": " sk_test_admin "})
    assert form.is_valid(), form.errors
    setting = form.save()
    assert secret_box.decrypt(setting.stripe_secret_key) == "sk_test_admin"


@pytest.mark.django_db
def test_admin_form_requires_key_on_create(mailbox):
    form = StripeSettingForm(data={"mailbox": mailbox.pk, "secret_key": ""})
    assert not form.is_valid()
    assert "secret_key" in form.errors


@pytest.mark.django_db
def test_admin_form_keeps_key_when_blank(stripe_setting, mailbox):
    before = stripe_setting.stripe_secret_key
    form = StripeSettingForm(data={"mailbox": mailbox.pk, "secret_key": ""}, instance=stripe_setting)
    assert form.is_valid(), form.errors
    form.save()
    assert StripeSetting.objects.get(pk=stripe_setting.pk).stripe_secret_key == before
