"""
================================================================================
Domain Models
================================================================================

Plain data records shared by the configuration layer, the fixture data
provider and the page objects.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict


_PRICE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")


def parse_price(text: str) -> Decimal:
    """
    Parse a currency display string into a Decimal.

    Accepts bare values ("29.99"), symbols ("$29.99") and labelled
    summary lines ("Item total: $29.99").

    Raises:
        ValueError: When no numeric value is present
    """
    match = _PRICE_PATTERN.search(text.replace(",", "") if text else "")
    if not match:
        raise ValueError(f"No price found in: {text!r}")
    try:
        return Decimal(match.group(1))
    except InvalidOperation as e:
        raise ValueError(f"Invalid price: {text!r}") from e


def _pick(data: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        if key in data and data[key] is not None:
            return str(data[key])
    return ""


@dataclass(frozen=True)
class Credentials:
    """Username/password pair used to log in."""
    username: str
    password: str = field(repr=False)

    def __str__(self) -> str:
        return f"Username: {self.username}"


@dataclass(frozen=True)
class CustomerInfo:
    """Customer details entered on the first checkout step."""
    first_name: str
    last_name: str
    postal_code: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomerInfo":
        return cls(
            first_name=_pick(data, "firstName", "FirstName", "first_name"),
            last_name=_pick(data, "lastName", "LastName", "last_name"),
            postal_code=_pick(data, "postalCode", "PostalCode", "postal_code"),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"Customer: {self.full_name}, Postal Code: {self.postal_code}"


@dataclass(frozen=True)
class Product:
    """Product fixture record. Price is kept as the display string."""
    name: str
    price: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            name=_pick(data, "name", "Name"),
            price=_pick(data, "price", "Price"),
            description=_pick(data, "description", "Description"),
        )

    @property
    def price_value(self) -> Decimal:
        return parse_price(self.price)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


@dataclass(frozen=True)
class OrderSummary:
    """Totals shown on the checkout overview screen (display strings)."""
    subtotal: str
    tax: str
    total: str

    def is_complete(self) -> bool:
        return all(value.strip() for value in (self.subtotal, self.tax, self.total))

    def totals_add_up(self) -> bool:
        """True when subtotal + tax equals total."""
        try:
            return parse_price(self.subtotal) + parse_price(self.tax) == parse_price(self.total)
        except ValueError:
            return False


__all__ = [
    "Credentials",
    "CustomerInfo",
    "OrderSummary",
    "Product",
    "parse_price",
]
