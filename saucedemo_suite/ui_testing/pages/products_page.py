"""
================================================================================
Products Page Object (Async / Playwright)
================================================================================

Inventory screen (`/inventory.html`): product list, cart badge, sorting,
side menu (reset / logout) and footer.

Each product row carries one toggle control whose label reads
"ADD TO CART" or "REMOVE" depending on cart membership.

================================================================================
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Sequence

import allure
from playwright.async_api import Error as PlaywrightError

from saucedemo_suite.ui_testing.framework.models import parse_price
from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class SortOption(str, Enum):
    """Labels of the product sort dropdown."""
    NAME_ASC = "Name (A to Z)"
    NAME_DESC = "Name (Z to A)"
    PRICE_ASC = "Price (low to high)"
    PRICE_DESC = "Price (high to low)"

    @classmethod
    def parse(cls, label: str) -> "SortOption":
        for option in cls:
            if option.value == label:
                return option
        raise ValueError(
            f"Unknown sort option '{label}'. Expected one of: "
            f"{', '.join(o.value for o in cls)}"
        )


def is_sorted_as(
    option: SortOption,
    names: Sequence[str],
    prices: Sequence[Decimal],
) -> bool:
    """True when the displayed names/prices are ordered according to `option`."""
    if option is SortOption.NAME_ASC:
        return list(names) == sorted(names)
    if option is SortOption.NAME_DESC:
        return list(names) == sorted(names, reverse=True)
    if option is SortOption.PRICE_ASC:
        return list(prices) == sorted(prices)
    return list(prices) == sorted(prices, reverse=True)


def copyright_is_outdated(text: str, year: Optional[int] = None) -> bool:
    """Footer still shows 2020 and not the current year."""
    current = str(year or date.today().year)
    return "2020" in text and current not in text


class ProductsPage(BasePage):
    """Products (inventory) page object (async)."""

    URL_PATH = "inventory.html"

    INVENTORY_CONTAINER = "#inventory_container"
    CART_BADGE = ".shopping_cart_badge"
    CART_LINK = ".shopping_cart_link"
    MENU_BUTTON = ".bm-burger-button button"
    LOGOUT_LINK = "#logout_sidebar_link"
    RESET_LINK = "#reset_sidebar_link"
    SORT_DROPDOWN = ".product_sort_container"
    INVENTORY_ITEM = ".inventory_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    ITEM_BUTTON = "button"
    FOOTER = ".footer"
    FOOTER_COPY = ".footer_copy"
    SOCIAL_LINKS = {
        "twitter": ".social_twitter",
        "facebook": ".social_facebook",
        "linkedin": ".social_linkedin",
    }

    ADD_LABEL = "Add to cart"
    REMOVE_LABEL = "Remove"
    LOGIN_URL_PATTERN = "**/index.html"
    RERENDER_WAIT = 1000

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.inventory_container = page.locator(self.INVENTORY_CONTAINER)
        self.cart_badge = page.locator(self.CART_BADGE)
        self.cart_link = page.locator(self.CART_LINK)
        self.menu_button = page.locator(self.MENU_BUTTON)
        self.logout_link = page.locator(self.LOGOUT_LINK)
        self.reset_link = page.locator(self.RESET_LINK)
        self.sort_dropdown = page.locator(self.SORT_DROPDOWN)
        self.inventory_items = page.locator(self.INVENTORY_ITEM)
        self.item_names = page.locator(self.ITEM_NAME)
        self.item_prices = page.locator(self.ITEM_PRICE)
        self.footer = page.locator(self.FOOTER)
        self.footer_copy = page.locator(self.FOOTER_COPY)

    def _product_row(self, name: str):
        return self.inventory_items.filter(has_text=name)

    def _row_button(self, name: str, label: str):
        return self._product_row(name).locator(self.ITEM_BUTTON).filter(has_text=label)

    # =========================================================================
    # Cart
    # =========================================================================

    @allure.step("Add product to cart: {name}")
    @transition
    async def add_product_to_cart(self, name: str) -> "ProductsPage":
        self.logger.step(f"Add product to cart: {name}")
        await self.click(self._row_button(name, self.ADD_LABEL), f"add '{name}'")
        return self

    @allure.step("Remove product from cart: {name}")
    @transition
    async def remove_product_from_cart(self, name: str) -> "ProductsPage":
        self.logger.step(f"Remove product from cart: {name}")
        await self.click(self._row_button(name, self.REMOVE_LABEL), f"remove '{name}'")
        return self

    async def get_cart_item_count(self) -> int:
        """Badge value; an absent badge means an empty cart."""
        if await self.count(self.cart_badge) == 0:
            return 0
        text = await self.text_or_empty(self.cart_badge)
        try:
            return int(text)
        except ValueError:
            self.logger.warning(f"Unexpected cart badge text: {text!r}")
            return 0

    async def is_product_in_cart(self, name: str) -> bool:
        """Membership as shown by the row control reading "Remove"."""
        try:
            label = await self._product_row(name).locator(self.ITEM_BUTTON).first.inner_text()
        except PlaywrightError as e:
            self.logger.warning(f"Could not read control for '{name}': {e}")
            return False
        return self.REMOVE_LABEL.casefold() in label.casefold()

    @allure.step("Go to cart")
    @transition
    async def go_to_cart(self):
        from .cart_page import CartPage

        await self.click(self.cart_link, "cart link")
        await self.page.wait_for_url(f"**/{CartPage.URL_PATH}")
        return self.next_page(CartPage)

    # =========================================================================
    # Listing & Sorting
    # =========================================================================

    @allure.step("Sort products: {option}")
    @transition
    async def sort_products(self, option: str) -> "ProductsPage":
        """Select a sort label and wait for the list to re-render."""
        label = SortOption.parse(option).value
        self.logger.step(f"Sort products by: {label}")
        await self.sort_dropdown.select_option(label=label)
        await self.page.wait_for_timeout(self.RERENDER_WAIT)
        return self

    async def get_product_names(self) -> List[str]:
        return await self.text_list(self.item_names)

    async def get_product_prices(self) -> List[Decimal]:
        prices: List[Decimal] = []
        for text in await self.text_list(self.item_prices):
            try:
                prices.append(parse_price(text))
            except ValueError:
                self.logger.warning(f"Unparseable price: {text!r}")
        return prices

    # =========================================================================
    # Side Menu
    # =========================================================================

    async def _open_menu(self) -> None:
        await self.click(self.menu_button, "menu button")
        await self.wait_for(self.logout_link)

    @allure.step("Reset app state")
    @transition
    async def reset_app_state(self) -> "ProductsPage":
        self.logger.step("Reset app state")
        await self._open_menu()
        await self.click(self.reset_link, "reset app state")
        await self.page.wait_for_timeout(self.RERENDER_WAIT)
        return self

    @allure.step("Logout")
    @transition
    async def logout(self):
        from .login_page import LoginPage

        self.logger.step("Logout")
        await self._open_menu()
        await self.click(self.logout_link, "logout")
        await self.page.wait_for_url(self.LOGIN_URL_PATTERN)
        return self.next_page(LoginPage)

    async def is_products_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.inventory_container)

    # =========================================================================
    # Footer
    # =========================================================================

    async def is_footer_visible(self) -> bool:
        return await self.is_element_visible(self.footer)

    async def is_social_media_link_clickable(self, network: str) -> bool:
        """
        Check a footer social link (Twitter, Facebook or LinkedIn).

        Clickable means it carries an href or onclick, or is an anchor/button.

        Raises:
            ValueError: For an unknown network name
        """
        selector = self.SOCIAL_LINKS.get(network.strip().lower())
        if selector is None:
            raise ValueError(f"Unknown social media network: {network}")

        link = self.page.locator(selector).first
        try:
            if not await link.is_visible():
                return False
            href = await link.get_attribute("href")
            onclick = await link.get_attribute("onclick")
            tag = (await link.evaluate("element => element.tagName")).lower()
        except PlaywrightError as e:
            self.logger.warning(f"Could not inspect {network} link: {e}")
            return False
        return bool(href) or bool(onclick) or tag in ("a", "button")

    async def get_footer_copyright_text(self) -> str:
        return await self.text_or_empty(self.footer_copy)

    async def is_copyright_year_outdated(self) -> bool:
        text = await self.get_footer_copyright_text()
        outdated = copyright_is_outdated(text)
        self.logger.assertion(
            "Footer copyright year is current",
            date.today().year,
            text,
            not outdated,
        )
        return outdated


__all__ = [
    "ProductsPage",
    "SortOption",
    "copyright_is_outdated",
    "is_sorted_as",
]
