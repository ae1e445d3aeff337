"""
Common test fixtures for the helpdesk backend.

Provides users and authenticated clients (JWT via `/api/auth/token/`,
as API consumers do), the host records the Stripe lookup walks
(mailbox, customer, conversation), a SecretBox and a fresh HookRegistry.
Loaded for every app's tests through the root `conftest.py`.
"""
import pytest
import stripe
from django.contrib.auth.models import User

from common.hooks import HookRegistry
from mailboxes.models import Conversation, Customer, CustomerEmail, Mailbox
from stripe_integration.crypto import build_secret_box
from stripe_integration.models import StripeSetting

TEST_SECRET_KEY = "sk_test_51HxYzAbCdEfGh1234"


def stripe_list(*objects):
    """A ``stripe.ListObject`` shaped like an SDK list response."""
    return stripe.ListObject.construct_from(
        {"object": "list", "url": "/v1/test", "has_more": False, "data": list(objects)},
        TEST_SECRET_KEY,
    )


def _token_client(client, username):
    resp = client.post(
        "/api/auth/token/",
        {"username": username, "password": "pass12345"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {resp.json()['access']}"
    return client


@pytest.fixture
def user(db):
    """Create a regular (non-staff) test user."""
    return User.objects.create_user(username="u1", password="pass12345", email="u1@example.com")


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        username="admin1", password="pass12345", email="admin1@example.com", is_staff=True
    )


@pytest.fixture
def auth_client(client, db, user):
    """Authenticate the Django test client as a regular user using JWT tokens."""
    return _token_client(client, "u1")


@pytest.fixture
def staff_client(client, db, staff_user):
    """Authenticate the Django test client as staff using JWT tokens."""
    return _token_client(client, "admin1")


@pytest.fixture
def mailbox(db):
    return Mailbox.objects.create(name="Support", email="support@example.com")


@pytest.fixture
def customer(db):
    """A customer whose main email is a@example.com."""
    c = Customer.objects.create(first_name="Ada", last_name="Lovelace")
    CustomerEmail.objects.create(customer=c, email="a@example.com")
    return c


@pytest.fixture
def conversation(db, mailbox, customer):
    return Conversation.objects.create(
        mailbox=mailbox, customer=customer, customer_email="a@example.com", subject="Billing question"
    )


@pytest.fixture
def secret_box():
    return build_secret_box()


@pytest.fixture
def stripe_setting(db, mailbox, secret_box):
    """Store TEST_SECRET_KEY, encrypted, for the mailbox."""
    return StripeSetting.objects.create(
        mailbox=mailbox, stripe_secret_key=secret_box.encrypt(TEST_SECRET_KEY)
    )


@pytest.fixture
def registry():
    return HookRegistry()
