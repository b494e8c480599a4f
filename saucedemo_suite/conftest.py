"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project markers and tags collected items:

- `ui` / `unit` by directory
- a lowercase category marker (login, products, cart, checkout, endtoend)
  derived from each scenario's `category("...")` marker, so that
  `-m "login or cart"` selects whole categories

================================================================================
"""

import re

import pytest


CATEGORY_MARKERS = {
    "login": "Login scenarios",
    "products": "Products page scenarios",
    "cart": "Shopping cart scenarios",
    "checkout": "Checkout scenarios",
    "endtoend": "End-to-end purchase flows",
}


def category_marker_name(category: str) -> str:
    """'EndToEnd' -> 'endtoend', 'Login' -> 'login'."""
    return re.sub(r"[^a-z0-9]", "", category.lower())


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven scenarios against the target application"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that need no browser"
    )
    config.addinivalue_line(
        "markers", "category(name): Report category of a scenario (Login, Cart, ...)"
    )

    # Category markers
    for name, description in CATEGORY_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """
    Add markers to tests dynamically.

    Runs before `-m` deselection so the derived markers can be selected on.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)

        category = item.get_closest_marker("category")
        if category is not None and category.args:
            name = category_marker_name(str(category.args[0]))
            if name:
                item.add_marker(getattr(pytest.mark, name))


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "SauceDemo UI Automation Framework",
        "=" * 60,
        "",
    ]
