"""
================================================================================
Checkout Step Two Page Object (Async / Playwright)
================================================================================

Read-only order overview with finish/cancel transitions. Totals are
returned as the display strings shown on screen.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from saucedemo_suite.ui_testing.framework.models import OrderSummary
from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class CheckoutStepTwoPage(BasePage):
    """Checkout: Overview (async)."""

    URL_PATH = "checkout-step-two.html"

    SUMMARY_CONTAINER = "#checkout_summary_container"
    CART_ITEM = ".cart_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    SUBTOTAL_LABEL = ".summary_subtotal_label"
    TAX_LABEL = ".summary_tax_label"
    TOTAL_LABEL = ".summary_total_label"
    FINISH_BUTTON = "a.btn_action.cart_button[href*='checkout-complete.html']"
    CANCEL_BUTTON = "a.cart_cancel_link.btn_secondary[href*='inventory.html']"

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.summary_container = page.locator(self.SUMMARY_CONTAINER)
        self.cart_items = page.locator(self.CART_ITEM)
        self.item_names = page.locator(f"{self.CART_ITEM} {self.ITEM_NAME}")
        self.item_prices = page.locator(f"{self.CART_ITEM} {self.ITEM_PRICE}")
        self.subtotal_label = page.locator(self.SUBTOTAL_LABEL)
        self.tax_label = page.locator(self.TAX_LABEL)
        self.total_label = page.locator(self.TOTAL_LABEL)
        self.finish_button = page.locator(self.FINISH_BUTTON)
        self.cancel_button = page.locator(self.CANCEL_BUTTON)

    async def get_checkout_item_names(self) -> List[str]:
        return await self.text_list(self.item_names)

    async def get_checkout_item_prices(self) -> List[str]:
        return await self.text_list(self.item_prices)

    async def get_checkout_item_count(self) -> int:
        return await self.count(self.cart_items)

    async def get_subtotal(self) -> str:
        return await self.text_or_empty(self.subtotal_label)

    async def get_tax(self) -> str:
        return await self.text_or_empty(self.tax_label)

    async def get_total(self) -> str:
        return await self.text_or_empty(self.total_label)

    async def get_order_summary(self) -> OrderSummary:
        return OrderSummary(
            subtotal=await self.get_subtotal(),
            tax=await self.get_tax(),
            total=await self.get_total(),
        )

    @allure.step("Finish checkout")
    @transition
    async def finish_checkout(self):
        from .checkout_complete_page import CheckoutCompletePage

        self.logger.step("Finish checkout")
        await self.click(self.finish_button, "finish")
        await self.page.wait_for_url(f"**/{CheckoutCompletePage.URL_PATH}")
        return self.next_page(CheckoutCompletePage)

    @allure.step("Cancel checkout")
    @transition
    async def cancel_checkout(self):
        from .products_page import ProductsPage

        await self.click(self.cancel_button, "cancel")
        await self.page.wait_for_url(f"**/{ProductsPage.URL_PATH}")
        return self.next_page(ProductsPage)

    async def is_checkout_step_two_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.summary_container)


__all__ = [
    "CheckoutStepTwoPage",
]
