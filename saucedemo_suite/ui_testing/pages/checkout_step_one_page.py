"""
================================================================================
Checkout Step One Page Object (Async / Playwright)
================================================================================

Customer information form. All three fields are required; submitting with
any of them empty shows an inline error and stays on this screen.

================================================================================
"""

from __future__ import annotations

import allure

from saucedemo_suite.ui_testing.framework.models import CustomerInfo
from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class CheckoutStepOnePage(BasePage):
    """Checkout: Your Information (async)."""

    URL_PATH = "checkout-step-one.html"

    CHECKOUT_INFO_CONTAINER = "#checkout_info_container"
    FIRST_NAME_INPUT = "#first-name"
    LAST_NAME_INPUT = "#last-name"
    POSTAL_CODE_INPUT = "#postal-code"
    CONTINUE_BUTTON = "input.btn_primary.cart_button[type='submit']"
    CANCEL_BUTTON = "a.cart_cancel_link.btn_secondary[href*='cart.html']"
    ERROR_MESSAGE = "[data-test='error']"

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.info_container = page.locator(self.CHECKOUT_INFO_CONTAINER)
        self.first_name_input = page.locator(self.FIRST_NAME_INPUT)
        self.last_name_input = page.locator(self.LAST_NAME_INPUT)
        self.postal_code_input = page.locator(self.POSTAL_CODE_INPUT)
        self.continue_button = page.locator(self.CONTINUE_BUTTON)
        self.cancel_button = page.locator(self.CANCEL_BUTTON)
        self.error_message = page.locator(self.ERROR_MESSAGE)

    @allure.step("Fill checkout form")
    @transition
    async def fill_checkout_form(self, info: CustomerInfo) -> "CheckoutStepOnePage":
        self.logger.step(f"Fill checkout form: {info}")
        await self.fill(self.first_name_input, info.first_name, "first name")
        await self.fill(self.last_name_input, info.last_name, "last name")
        await self.fill(self.postal_code_input, info.postal_code, "postal code")
        return self

    @allure.step("Continue to checkout overview")
    @transition
    async def continue_to_step_two(self):
        from .checkout_step_two_page import CheckoutStepTwoPage

        await self.click(self.continue_button, "continue")
        await self.page.wait_for_url(f"**/{CheckoutStepTwoPage.URL_PATH}")
        return self.next_page(CheckoutStepTwoPage)

    @allure.step("Continue with empty form")
    @transition
    async def continue_with_empty_form(self) -> "CheckoutStepOnePage":
        """Submit as-is to trigger validation; waits for the error banner."""
        await self.click(self.continue_button, "continue")
        await self.wait_for(self.error_message)
        return self

    @allure.step("Cancel checkout")
    @transition
    async def cancel_checkout(self):
        from .cart_page import CartPage

        await self.click(self.cancel_button, "cancel")
        await self.page.wait_for_url(f"**/{CartPage.URL_PATH}")
        return self.next_page(CartPage)

    @transition
    async def get_error_message(self) -> str:
        return await self.get_text(self.error_message)

    async def is_error_message_displayed(self) -> bool:
        return await self.is_element_visible(self.error_message)

    @allure.step("Clear checkout form")
    @transition
    async def clear_checkout_form(self) -> "CheckoutStepOnePage":
        for field in (self.first_name_input, self.last_name_input, self.postal_code_input):
            await field.fill("")
        return self

    async def is_checkout_step_one_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.info_container)


__all__ = [
    "CheckoutStepOnePage",
]
