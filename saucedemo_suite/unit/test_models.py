from decimal import Decimal

import pytest

from saucedemo_suite.ui_testing.framework.models import (
    Credentials,
    CustomerInfo,
    OrderSummary,
    Product,
    parse_price,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("29.99", Decimal("29.99")),
        ("$29.99", Decimal("29.99")),
        ("Item total: $29.99", Decimal("29.99")),
        ("Tax: $2.40", Decimal("2.40")),
        ("$1,299.00", Decimal("1299.00")),
        ("7", Decimal("7")),
    ],
)
def test_parse_price(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize("text", ["", "free", None])
def test_parse_price_rejects_text_without_a_number(text):
    with pytest.raises(ValueError):
        parse_price(text)


def test_credentials_never_show_password():
    credentials = Credentials(username="standard_user", password="secret_sauce")

    assert str(credentials) == "Username: standard_user"
    assert "secret_sauce" not in repr(credentials)


def test_credentials_are_immutable():
    credentials = Credentials(username="standard_user", password="secret_sauce")

    with pytest.raises(AttributeError):
        credentials.username = "other"


@pytest.mark.parametrize(
    "record",
    [
        {"firstName": "John", "lastName": "Doe", "postalCode": "12345"},
        {"FirstName": "John", "LastName": "Doe", "PostalCode": "12345"},
        {"first_name": "John", "last_name": "Doe", "postal_code": 12345},
    ],
)
def test_customer_info_from_fixture_keys(record):
    customer = CustomerInfo.from_dict(record)

    assert customer == CustomerInfo("John", "Doe", "12345")
    assert customer.full_name == "John Doe"


def test_customer_info_missing_keys_become_empty():
    assert CustomerInfo.from_dict({"firstName": "John"}) == CustomerInfo("John", "", "")


def test_product_price_value():
    product = Product.from_dict({"name": "Sauce Labs Onesie", "price": "$7.99"})

    assert product.price_value == Decimal("7.99")
    assert product.description == ""
    assert str(product) == "Sauce Labs Onesie - $7.99"


def test_order_summary_totals():
    summary = OrderSummary("Item total: $29.99", "Tax: $2.40", "Total: $32.39")

    assert summary.is_complete()
    assert summary.totals_add_up()


def test_order_summary_detects_mismatch_and_missing_values():
    assert not OrderSummary("Item total: $29.99", "Tax: $2.40", "Total: $40.00").totals_add_up()
    assert not OrderSummary("Item total: $29.99", "", "Total: $32.39").is_complete()
    assert not OrderSummary("Item total: $29.99", "", "Total: $32.39").totals_add_up()
