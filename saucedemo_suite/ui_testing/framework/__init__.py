"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the SauceDemo storefront.

Components:
    - config_loader: YAML settings and named credentials
    - data_provider: JSON fixture data (products, customers, messages)
    - suite_logger: Loguru logger bound to the running test
    - browser_manager: Per-test browser session lifecycle
    - page_base: Base page object for common operations
    - lifecycle: Suite and per-test setup/teardown

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserSession, BrowserSessionError, SessionState
from .config_loader import (
    BrowserEngine,
    ConfigLoader,
    ConfigurationError,
    CredentialsNotFoundError,
)
from .data_provider import TestDataError, TestDataProvider
from .lifecycle import SuiteContext, TestRun
from .models import Credentials, CustomerInfo, OrderSummary, Product, parse_price
from .page_base import BasePage
from .suite_logger import TestLogger

__all__ = [
    "BasePage",
    "BrowserEngine",
    "BrowserSession",
    "BrowserSessionError",
    "ConfigLoader",
    "ConfigurationError",
    "Credentials",
    "CredentialsNotFoundError",
    "CustomerInfo",
    "OrderSummary",
    "Product",
    "SessionState",
    "SuiteContext",
    "TestDataError",
    "TestDataProvider",
    "TestLogger",
    "TestRun",
    "parse_price",
]
