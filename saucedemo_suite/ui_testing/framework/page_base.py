"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model implementation.

Provides:
    - URL/title page identification
    - Logged, Allure-stepped element interactions
    - Conservative read helpers (never raise on missing elements)
    - Screenshot and failure capture utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import functools
from datetime import datetime
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Type, TypeVar

import allure
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from saucedemo_tools.report_tools.allure_utils import attach_file, attach_text

from .config_loader import ConfigLoader
from .suite_logger import TestLogger


PageT = TypeVar("PageT", bound="BasePage")

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def transition(action: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """
    Decorate a page action that interacts with the browser.

    Any error raised by the action triggers a failure screenshot and is then
    re-raised unchanged.
    """

    @functools.wraps(action)
    async def wrapper(self: "BasePage", *args: Any, **kwargs: Any) -> Any:
        try:
            return await action(self, *args, **kwargs)
        except Exception as e:
            self.logger.error(f"{type(self).__name__}.{action.__name__} failed: {e}")
            await self.capture_failure(action.__name__)
            raise

    return wrapper


class BasePage:
    """
    Base class for all page objects.

    A page object is bound to one screen. Locators are built in __init__
    (Playwright locators are lazy) and only queried by the page's methods.

    Usage:
        class CartPage(BasePage):
            URL_PATH = "cart.html"

            async def get_cart_item_count(self) -> int:
                return await self.count(self.CART_ITEM)
    """

    # Override in subclasses
    URL_PATH: str = "index.html"
    PAGE_TITLE: str = "Swag Labs"

    def __init__(
        self,
        page: Page,
        logger: TestLogger,
        config: ConfigLoader,
    ):
        """
        Initialize page object.

        Args:
            page: Active Playwright page owned by the current test
            logger: Logger bound to the current test
            config: Loaded suite configuration
        """
        self.page = page
        self.logger = logger
        self.config = config

    @property
    def url(self) -> str:
        """Absolute URL of this screen."""
        return self.config.page_url(self.URL_PATH)

    def next_page(self, page_class: Type[PageT]) -> PageT:
        """Page object for the screen reached by a transition."""
        return page_class(self.page, self.logger, self.config)

    @allure.step("Verify current screen")
    async def is_on_page(self) -> bool:
        """
        Coarse identity check: URL fragment and title, containment either way.

        Returns False instead of raising when the page cannot be read.
        """
        try:
            current_url = self.page.url or ""
            current_title = await self.page.title() or ""
        except PlaywrightError as e:
            self.logger.warning(f"Could not read page state: {e}")
            return False

        url_matches = bool(current_url) and (
            self.URL_PATH in current_url or current_url in self.URL_PATH
        )
        title_matches = bool(current_title) and (
            self.PAGE_TITLE in current_title or current_title in self.PAGE_TITLE
        )
        result = url_matches and title_matches

        self.logger.assertion(
            f"{type(self).__name__} is displayed",
            f"{self.URL_PATH} / {self.PAGE_TITLE}",
            f"{current_url} / {current_title}",
            result,
        )
        return result

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, locator: Locator, description: str) -> None:
        with allure.step(f"Click: {description}"):
            self.logger.debug(f"Click: {description}")
            await locator.click()

    async def fill(self, locator: Locator, value: str, description: str) -> None:
        shown = "*" * len(value) if "password" in description.lower() else value
        with allure.step(f"Fill {description}: {shown}"):
            self.logger.debug(f"Fill {description}: {shown}")
            await locator.fill(value)

    async def get_text(self, locator: Locator, timeout: Optional[int] = None) -> str:
        """Trimmed inner text; raises when the element never appears."""
        await locator.wait_for(state="visible", timeout=timeout)
        return (await locator.inner_text()).strip()

    async def wait_for(
        self,
        locator: Locator,
        state: str = "visible",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for element to reach specified state.

        Args:
            locator: Element locator
            state: 'visible', 'hidden', 'attached' or 'detached'
            timeout: Milliseconds (defaults to config implicit_wait)
        """
        await locator.wait_for(state=state, timeout=timeout or self.config.implicit_wait)

    # =========================================================================
    # Conservative Reads
    # =========================================================================

    async def is_element_visible(self, locator: Locator, timeout: int = 2000) -> bool:
        try:
            await locator.first.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    async def count(self, locator: Locator) -> int:
        try:
            return await locator.count()
        except PlaywrightError as e:
            self.logger.warning(f"Count failed: {e}")
            return 0

    async def text_list(self, locator: Locator) -> List[str]:
        """Trimmed, non-empty inner texts of every match."""
        try:
            texts = await locator.all_inner_texts()
        except PlaywrightError as e:
            self.logger.warning(f"Reading texts failed: {e}")
            return []
        return [text.strip() for text in texts if text and text.strip()]

    async def text_or_empty(self, locator: Locator, timeout: int = 2000) -> str:
        try:
            return await self.get_text(locator, timeout=timeout)
        except PlaywrightError as e:
            self.logger.warning(f"Reading text failed: {e}")
            return ""

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(self, name: str, attach_to_allure: bool = True) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Returns:
            Path to `<screenshots>/<PageClass>_<name>_<timestamp>.png`
        """
        directory = self.config.output_dir("screenshots")
        directory.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        filepath = directory / f"{type(self).__name__}_{name}_{timestamp}.png"
        await self.page.screenshot(path=str(filepath), full_page=True)

        if attach_to_allure:
            attach_file(filepath, name=name)
        self.logger.info(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, name: str) -> Optional[Path]:
        """
        Capture a failure screenshot when enabled. Never raises.
        """
        if not self.config.screenshot_on_failure:
            return None
        try:
            path = await self.screenshot(f"failure_{name}")
            attach_text(self.page.url or "", name="Current URL")
            return path
        except Exception as e:
            self.logger.warning(f"Failed to capture failure screenshot: {e}")
            return None


__all__ = [
    "BasePage",
    "transition",
]
