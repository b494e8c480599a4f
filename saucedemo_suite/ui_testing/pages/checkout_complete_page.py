"""
================================================================================
Checkout Complete Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

import allure

from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class CheckoutCompletePage(BasePage):
    """Order confirmation screen (async)."""

    URL_PATH = "checkout-complete.html"

    COMPLETE_CONTAINER = "#checkout_complete_container"
    COMPLETE_HEADER = ".complete-header"
    COMPLETE_TEXT = ".complete-text"

    THANK_YOU_PHRASE = "THANK YOU FOR YOUR ORDER"
    DISPATCH_PHRASE = "Your order has been dispatched"

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.complete_container = page.locator(self.COMPLETE_CONTAINER)
        self.complete_header = page.locator(self.COMPLETE_HEADER)
        self.complete_text = page.locator(self.COMPLETE_TEXT)

    async def get_complete_header(self) -> str:
        return await self.text_or_empty(self.complete_header)

    async def get_complete_text(self) -> str:
        return await self.text_or_empty(self.complete_text)

    @allure.step("Verify order completion")
    async def verify_order_completion(self) -> bool:
        header = await self.get_complete_header()
        text = await self.get_complete_text()
        completed = (
            self.THANK_YOU_PHRASE.casefold() in header.casefold()
            and self.DISPATCH_PHRASE.casefold() in text.casefold()
        )
        self.logger.assertion(
            "Order completion message",
            f"{self.THANK_YOU_PHRASE} / {self.DISPATCH_PHRASE}",
            f"{header} / {text}",
            completed,
        )
        return completed

    @allure.step("Back to products")
    @transition
    async def back_to_products(self):
        """Navigate straight to the inventory URL; the side menu is unreliable here."""
        from .products_page import ProductsPage

        products = self.next_page(ProductsPage)
        await self.page.goto(products.url)
        await self.page.wait_for_load_state("networkidle")
        return products

    async def is_checkout_complete_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.complete_container)


__all__ = [
    "CheckoutCompletePage",
]
