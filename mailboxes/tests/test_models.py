"""
Tests for the mailboxes models the Stripe lookup depends on.
"""
import pytest

from mailboxes.models import Conversation, Customer, CustomerEmail


@pytest.mark.django_db
def test_main_email_is_first_recorded(customer):
    CustomerEmail.objects.create(customer=customer, email="second@example.com")
    assert customer.get_main_email() == "a@example.com"


@pytest.mark.django_db
def test_main_email_empty_without_emails():
    assert Customer.objects.create(first_name="Nobody").get_main_email() == ""


@pytest.mark.django_db
def test_emails_are_lower_cased(mailbox, customer):
    email = CustomerEmail.objects.create(customer=customer, email="  Mixed@Example.COM ")
    conversation = Conversation.objects.create(mailbox=mailbox, customer_email="Mixed@Example.COM")
    assert email.email == "mixed@example.com"
    assert conversation.customer_email == "mixed@example.com"
