"""
================================================================================
Cart Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class CartPage(BasePage):
    """Shopping cart page object (async)."""

    URL_PATH = "cart.html"

    CART_CONTAINER = "#cart_contents_container"
    CART_ITEM = ".cart_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    CONTINUE_SHOPPING_BUTTON = "a.btn_secondary[href*='inventory.html']"
    CHECKOUT_BUTTON = "a.btn_action.checkout_button[href*='checkout-step-one.html']"
    REMOVE_BUTTON = "button[data-test*='remove'], .cart_button"

    REMOVE_PAUSE = 500

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.cart_container = page.locator(self.CART_CONTAINER)
        self.cart_items = page.locator(self.CART_ITEM)
        self.item_names = page.locator(f"{self.CART_ITEM} {self.ITEM_NAME}")
        self.item_prices = page.locator(f"{self.CART_ITEM} {self.ITEM_PRICE}")
        self.continue_shopping_button = page.locator(self.CONTINUE_SHOPPING_BUTTON)
        self.checkout_button = page.locator(self.CHECKOUT_BUTTON)
        self.remove_buttons = page.locator(self.REMOVE_BUTTON)

    async def get_cart_item_names(self) -> List[str]:
        return await self.text_list(self.item_names)

    async def get_cart_item_prices(self) -> List[str]:
        """Prices as displayed (currency strings)."""
        return await self.text_list(self.item_prices)

    async def get_cart_item_count(self) -> int:
        return await self.count(self.cart_items)

    @allure.step("Remove item from cart: {name}")
    @transition
    async def remove_item_from_cart(self, name: str) -> "CartPage":
        self.logger.step(f"Remove item from cart: {name}")
        row = self.cart_items.filter(has_text=name)
        await self.click(row.locator(self.REMOVE_BUTTON), f"remove '{name}'")
        return self

    @allure.step("Remove all items from cart")
    @transition
    async def remove_all_items_from_cart(self) -> "CartPage":
        """Click every remove control from the last row to the first."""
        total = await self.count(self.remove_buttons)
        self.logger.step(f"Remove all items from cart ({total})")
        for index in range(total - 1, -1, -1):
            await self.click(self.remove_buttons.nth(index), f"remove item #{index + 1}")
            await self.page.wait_for_timeout(self.REMOVE_PAUSE)
        return self

    @allure.step("Continue shopping")
    @transition
    async def continue_shopping(self):
        from .products_page import ProductsPage

        await self.click(self.continue_shopping_button, "continue shopping")
        await self.page.wait_for_url(f"**/{ProductsPage.URL_PATH}")
        return self.next_page(ProductsPage)

    @allure.step("Proceed to checkout")
    @transition
    async def proceed_to_checkout(self):
        from .checkout_step_one_page import CheckoutStepOnePage

        await self.click(self.checkout_button, "checkout")
        await self.page.wait_for_url(f"**/{CheckoutStepOnePage.URL_PATH}")
        return self.next_page(CheckoutStepOnePage)

    async def is_cart_empty(self) -> bool:
        return await self.get_cart_item_count() == 0

    async def is_cart_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.cart_container)


__all__ = [
    "CartPage",
]
