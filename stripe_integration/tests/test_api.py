"""
Tests for the read-only Stripe client.

The SDK's resource classes are monkeypatched so no request leaves the
process.  The fakes answer with real ``StripeObject`` instances built by
``construct_from`` and record the keyword arguments of every call.
"""
import pytest
import stripe

from stripe_integration.api import Stripe
from tests.fixtures import stripe_list


def invoice(id, number, lines=None, **fields):
    values = {"object": "invoice", "id": id, "number": number, **fields}
    if lines is not None:
        values["lines"] = {"object": "list", "data": [
            {"object": "line_item", "id": f"il_{i}", "description": description}
            for i, description in enumerate(lines)
        ]}
    return values


def subscription(id, status, *items, **fields):
    return {
        "object": "subscription",
        "id": id,
        "status": status,
        "items": {"object": "list", "data": [
            {
                "object": "subscription_item",
                "id": f"si_{id}_{i}",
                "price": {"object": "price", "id": f"price_{i}", "product": product},
                **extra,
            }
            for i, (product, extra) in enumerate(items)
        ]},
        **fields,
    }


class FakeStripe:
    """Stands in for stripe.Customer/Invoice/Subscription/Product."""

    def __init__(self, monkeypatch):
        self.calls = []
        self.customers = [{"object": "customer", "id": "cus_1"}, {"object": "customer", "id": "cus_2"}]
        self.invoices = {
            "cus_1": [invoice("in_1", "A-0001", lines=["1 × Pro plan", None])],
            "cus_2": [invoice("in_2", "A-0002", lines=[])],
        }
        self.subscriptions = {
            "cus_1": [subscription(
                "sub_1", "active", ("prod_1", {}), ("prod_1", {}), current_period_end=1700000000,
            )],
            "cus_2": [subscription(
                "sub_2", "canceled", ({"object": "product", "id": "prod_2", "name": "Starter"}, {}),
            )],
        }
        monkeypatch.setattr(stripe.Customer, "list", self.list_customers)
        monkeypatch.setattr(stripe.Invoice, "list", self.list_invoices)
        monkeypatch.setattr(stripe.Subscription, "list", self.list_subscriptions)
        monkeypatch.setattr(stripe.Product, "retrieve", self.retrieve_product)

    def list_customers(self, **kwargs):
        self.calls.append(("customers", kwargs))
        return stripe_list(*self.customers)

    def list_invoices(self, **kwargs):
        self.calls.append(("invoices", kwargs))
        return stripe_list(*self.invoices[kwargs["customer"]])

    def list_subscriptions(self, **kwargs):
        self.calls.append(("subscriptions", kwargs))
        return stripe_list(*self.subscriptions[kwargs["customer"]])

    def retrieve_product(self, product_id, **kwargs):
        self.calls.append(("product", dict(kwargs, id=product_id)))
        return stripe.Product.construct_from(
            {"object": "product", "id": product_id, "name": "Pro plan"}, kwargs.get("api_key")
        )


@pytest.fixture
def fake_stripe(monkeypatch):
    return FakeStripe(monkeypatch)


def test_empty_key_short_circuits(fake_stripe):
    client = Stripe("")
    assert client.get_invoices("a@example.com") is False
    assert client.get_subscriptions("a@example.com") is False
    assert fake_stripe.calls == []


def test_invoices_for_every_customer_with_the_email(fake_stripe):
    result = Stripe("sk_test_1", limit=5).get_invoices("a@example.com")
    assert [entry["invoice"]["id"] for entry in result] == ["in_1", "in_2"]
    assert result[0]["products"] == ["1 × Pro plan"]
    assert result[1]["products"] == []
    assert isinstance(result[0]["invoice"], stripe.Invoice)
    assert fake_stripe.calls[0] == ("customers", {"email": "a@example.com", "limit": 5, "api_key": "sk_test_1"})


def test_invoice_without_lines_has_no_products(fake_stripe):
    fake_stripe.invoices["cus_1"] = [invoice("in_3", "A-0003")]
    result = Stripe("sk_test_1").get_invoices("a@example.com")
    assert result[0]["invoice"]["id"] == "in_3"
    assert result[0]["products"] == []


def test_expanded_product_is_not_fetched_again(fake_stripe):
    fake_stripe.subscriptions["cus_1"] = []
    result = Stripe("sk_test_1").get_subscriptions("a@example.com")
    assert isinstance(result[0]["subscription"]["items"]["data"][0]["price"]["product"], stripe.Product)
    assert result[0]["products"] == ["Starter"]
    assert [c for c in fake_stripe.calls if c[0] == "product"] == []


def test_renewal_date_falls_back_to_the_first_item(fake_stripe):
    fake_stripe.subscriptions["cus_2"] = [subscription(
        "sub_3", "active", ("prod_1", {"current_period_end": 1800000000}),
    )]
    result = Stripe("sk_test_1").get_subscriptions("a@example.com")
    assert [entry["renews_at"] for entry in result] == [1700000000, 1800000000]


def test_renewal_date_missing_everywhere(fake_stripe):
    result = Stripe("sk_test_1").get_subscriptions("a@example.com")
    assert result[1]["renews_at"] is None


def test_subscriptions_resolve_product_names_once_per_call(fake_stripe):
    client = Stripe("sk_test_1")
    result = client.get_subscriptions("a@example.com")
    assert [entry["subscription"]["id"] for entry in result] == ["sub_1", "sub_2"]
    assert result[0]["products"] == ["Pro plan", "Pro plan"]
    assert result[1]["products"] == ["Starter"]
    assert [c for c in fake_stripe.calls if c[0] == "product"] == [
        ("product", {"id": "prod_1", "api_key": "sk_test_1"}),
    ]
    sub_calls = [kwargs for name, kwargs in fake_stripe.calls if name == "subscriptions"]
    assert all(kwargs["status"] == "all" for kwargs in sub_calls)

    # nothing is cached between calls
    client.get_subscriptions("a@example.com")
    assert len([c for c in fake_stripe.calls if c[0] == "product"]) == 2


def test_every_request_carries_the_key_and_version(fake_stripe):
    Stripe("sk_test_1", api_version="2024-06-20").get_invoices("a@example.com")
    for _, kwargs in fake_stripe.calls:
        assert kwargs["api_key"] == "sk_test_1"
        assert kwargs["stripe_version"] == "2024-06-20"


def test_stripe_errors_return_false(fake_stripe, monkeypatch, caplog):
    def fail(**kwargs):
        raise stripe.AuthenticationError("Invalid API Key provided: sk_test_***1")

    monkeypatch.setattr(stripe.Customer, "list", fail)
    client = Stripe("sk_test_1")
    with caplog.at_level("WARNING", logger="stripe_integration.api"):
        assert client.get_invoices("a@example.com") is False
        assert client.get_subscriptions("a@example.com") is False
    assert "AuthenticationError" in caplog.text
    assert "sk_test_1" not in caplog.text
