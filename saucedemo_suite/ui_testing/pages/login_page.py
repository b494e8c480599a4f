"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Landing screen of the application (`/index.html`).

================================================================================
"""

from __future__ import annotations

import allure

from saucedemo_suite.ui_testing.framework.models import Credentials
from saucedemo_suite.ui_testing.framework.page_base import BasePage, transition


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "index.html"

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = "[data-test='error']"
    LOGIN_FORM = "form"

    PRODUCTS_URL_PATTERN = "**/inventory.html"
    LOGIN_TIMEOUT = 10000

    def __init__(self, page, logger, config):
        super().__init__(page, logger, config)
        self.username_input = page.locator(self.USERNAME_INPUT)
        self.password_input = page.locator(self.PASSWORD_INPUT)
        self.login_button = page.locator(self.LOGIN_BUTTON)
        self.error_message = page.locator(self.ERROR_MESSAGE)
        self.login_form = page.locator(self.LOGIN_FORM)

    @allure.step("Open login page")
    @transition
    async def open(self) -> "LoginPage":
        await self.page.goto(self.url)
        await self.page.wait_for_load_state("networkidle")
        return self

    async def _submit(self, credentials: Credentials) -> None:
        self.logger.step(f"Login with {credentials}")
        await self.fill(self.username_input, credentials.username, "username")
        await self.fill(self.password_input, credentials.password, "password")
        await self.click(self.login_button, "login button")

    @allure.step("Login")
    @transition
    async def login(self, credentials: Credentials):
        """Submit valid credentials and wait for the products screen."""
        from .products_page import ProductsPage

        await self._submit(credentials)
        await self.page.wait_for_url(self.PRODUCTS_URL_PATTERN, timeout=self.LOGIN_TIMEOUT)
        self.logger.info(f"Logged in as {credentials.username}")
        return self.next_page(ProductsPage)

    @allure.step("Login with invalid credentials")
    @transition
    async def login_with_invalid_credentials(self, credentials: Credentials) -> "LoginPage":
        """Submit credentials that must be rejected; stays on this screen."""
        await self._submit(credentials)
        await self.wait_for(self.error_message)
        return self

    async def is_error_message_displayed(self) -> bool:
        return await self.is_element_visible(self.error_message)

    @transition
    async def get_error_message(self) -> str:
        return await self.get_text(self.error_message)

    @allure.step("Clear login form")
    @transition
    async def clear_form(self) -> None:
        await self.username_input.fill("")
        await self.password_input.fill("")

    async def is_login_page_displayed(self) -> bool:
        return await self.is_on_page() and await self.is_element_visible(self.login_form)


__all__ = [
    "LoginPage",
]
