"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the SauceDemo screens.

Each page class encapsulates:
    - Element locators
    - Page-specific actions (returning the page object of the next screen)
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_complete_page import CheckoutCompletePage
from .checkout_step_one_page import CheckoutStepOnePage
from .checkout_step_two_page import CheckoutStepTwoPage
from .login_page import LoginPage
from .products_page import ProductsPage, SortOption

__all__ = [
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutStepOnePage",
    "CheckoutStepTwoPage",
    "LoginPage",
    "ProductsPage",
    "SortOption",
]
