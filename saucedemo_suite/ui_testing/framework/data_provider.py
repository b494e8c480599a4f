"""
================================================================================
Test Data Provider
================================================================================

Loads static fixture data (products, customer records, sort options and
expected error strings) from a JSON file.

Features:
- Load-once parse, held for the provider's lifetime
- Case-insensitive product lookup
- Seedable random customer selection for reproducible runs

================================================================================
"""

from __future__ import annotations

import json
import os
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from .models import CustomerInfo, Product


DEFAULT_TEST_DATA_PATH = Path(__file__).resolve().parents[3] / "config" / "test_data.json"

# Environment variable used when no explicit seed is configured
SEED_ENV = "TEST_DATA_SEED"


class TestDataError(Exception):
    """Raised when fixture data is missing, malformed or lacks a requested key."""
    __test__ = False


class TestDataProvider:
    """
    Read-only access to fixture data.

    Usage:
        >>> data = TestDataProvider(seed=42)
        >>> data.get_error_message("LockedOutUser")
        'Epic sadface: Sorry, this user has been locked out.'
        >>> data.get_random_customer_record()
        CustomerInfo(first_name='John', last_name='Doe', postal_code='12345')
    """

    __test__ = False

    def __init__(self, data_path: Optional[Path] = None, seed: Optional[int] = None):
        """
        Initialize provider.

        Args:
            data_path: JSON fixture file (defaults to config/test_data.json)
            seed: Random seed for customer selection. Falls back to the
                  TEST_DATA_SEED env var; None means non-deterministic.
        """
        self._data_path = Path(data_path or DEFAULT_TEST_DATA_PATH)
        if seed is None and os.environ.get(SEED_ENV):
            try:
                seed = int(os.environ[SEED_ENV])
            except ValueError as e:
                raise TestDataError(f"{SEED_ENV} must be an integer") from e
        self.seed = seed
        self._random = random.Random(seed)
        self._data: Optional[Dict[str, Any]] = self._load()
        logger.debug(f"Loaded test data from: {self._data_path} (seed={seed})")

    def _load(self) -> Dict[str, Any]:
        if not self._data_path.exists():
            raise TestDataError(f"Test data file not found: {self._data_path}")
        try:
            with open(self._data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise TestDataError(f"Invalid JSON in test data file: {e}") from e
        if not isinstance(data, dict):
            raise TestDataError("Test data root must be an object")
        return data

    @property
    def _document(self) -> Dict[str, Any]:
        if self._data is None:
            raise TestDataError("Test data provider has been closed")
        return self._data

    def _section(self, *names: str) -> Any:
        for name in names:
            if name in self._document:
                return self._document[name]
        raise TestDataError(f"Missing '{names[0]}' section in test data")

    # =========================================================================
    # Products
    # =========================================================================

    def get_products(self) -> List[Product]:
        return [Product.from_dict(item) for item in self._section("products", "Products")]

    def get_product(self, name: str) -> Optional[Product]:
        """Find a product by name (case-insensitive); None when absent."""
        wanted = name.casefold()
        for product in self.get_products():
            if product.name.casefold() == wanted:
                return product
        return None

    # =========================================================================
    # Customers
    # =========================================================================

    def get_customer_records(self) -> List[CustomerInfo]:
        records = self._section("customers", "CustomerInfo")
        return [CustomerInfo.from_dict(item) for item in records]

    def get_random_customer_record(self) -> CustomerInfo:
        """Uniform random pick; fails when no records are configured."""
        records = self.get_customer_records()
        if not records:
            raise TestDataError("No customer records available")
        customer = self._random.choice(records)
        logger.debug(f"Selected customer record: {customer}")
        return customer

    # =========================================================================
    # Sort Options & Error Messages
    # =========================================================================

    def get_sort_options(self) -> List[str]:
        return [str(o) for o in self._section("sort_options", "SortOptions") if o]

    def get_error_messages(self) -> Dict[str, str]:
        return {str(k): str(v) for k, v in self._section("error_messages", "ErrorMessages").items()}

    def get_error_message(self, key: str) -> str:
        messages = self.get_error_messages()
        if key not in messages:
            raise TestDataError(f"Failed to load error message for key '{key}'")
        return messages[key]

    def close(self) -> None:
        """Release the parsed document."""
        self._data = None


__all__ = [
    "TestDataError",
    "TestDataProvider",
]
