from datetime import datetime, timezone

from stripe_integration.templatetags.stripe_tags import stripe_amount, stripe_date


def test_stripe_amount():
    assert stripe_amount(1234, "usd") == "12.34 USD"
    assert stripe_amount(5, "eur") == "0.05 EUR"
    assert stripe_amount(500, "jpy") == "500 JPY"
    assert stripe_amount(1000, "kwd") == "1.000 KWD"
    assert stripe_amount(12345, "BHD") == "12.345 BHD"
    assert stripe_amount(None, "usd") == ""


def test_stripe_date():
    assert stripe_date(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert stripe_date(None) is None
