"""
================================================================================
Browser Manager
================================================================================

Per-test browser lifecycle management for UI automation.

Features:
    - One browser / one context / one page per session
    - Explicit lifecycle states (UNINITIALIZED -> INITIALIZING -> READY -> CLOSED)
    - Optional video recording and Playwright tracing
    - Timestamped screenshots

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import BrowserEngine, ConfigLoader
from .suite_logger import TestLogger


TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class BrowserSessionError(RuntimeError):
    """Raised when a session operation is invalid for its current state."""
    pass


class SessionState(str, Enum):
    UNINITIALIZED = "Uninitialized"
    INITIALIZING = "Initializing"
    READY = "Ready"
    CLOSED = "Closed"


class BrowserSession:
    """
    Owns the browser, context and page used by exactly one test.

    Usage:
        async with BrowserSession(config, TestLogger("test_login")) as session:
            await session.navigate_to(config.base_url)
            await session.screenshot("landing")
    """

    # Chromium-only launch flags
    CHROMIUM_ARGS = [
        "--ignore-certificate-errors",
        "--disable-dev-shm-usage",
    ]

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        config: ConfigLoader,
        logger: TestLogger,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        """
        Initialize browser session.

        Args:
            config: Loaded suite configuration
            logger: Logger bound to the owning test
            playwright_factory: Returns an object whose start() yields a Playwright
        """
        self.config = config
        self.logger = logger
        self._playwright_factory = playwright_factory

        self._state = SessionState.UNINITIALIZED
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._tracing = False

    async def __aenter__(self) -> "BrowserSession":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def page(self) -> Page:
        if self._state is not SessionState.READY or self._page is None:
            raise BrowserSessionError(f"No active page (session is {self._state.value})")
        return self._page

    @property
    def current_url(self) -> str:
        return self._page.url if self._page is not None else ""

    @property
    def tracing(self) -> bool:
        return self._tracing

    async def initialize(self) -> None:
        """Start Playwright, launch the configured browser and open one page."""
        if self._state is not SessionState.UNINITIALIZED:
            raise BrowserSessionError(
                f"Cannot initialize a session in state {self._state.value}"
            )
        self._state = SessionState.INITIALIZING
        engine: BrowserEngine = self.config.browser

        try:
            self._playwright = await self._playwright_factory().start()
            launcher = getattr(self._playwright, engine.playwright_name)

            launch_options: Dict[str, Any] = {
                "headless": self.config.headless,
                "slow_mo": self.config.slow_mo,
            }
            if engine is BrowserEngine.CHROMIUM:
                launch_options["args"] = list(self.CHROMIUM_ARGS)
            self._browser = await launcher.launch(**launch_options)

            context_options = dict(self.DEFAULT_CONTEXT_OPTIONS)
            if self.config.video_recording:
                video_dir = self.config.output_dir("videos")
                video_dir.mkdir(parents=True, exist_ok=True)
                context_options["record_video_dir"] = str(video_dir)
            self._context = await self._browser.new_context(**context_options)

            if self.config.trace_on_failure:
                await self._context.tracing.start(screenshots=True, snapshots=True, sources=True)
                self._tracing = True

            self._page = await self._context.new_page()
            self._page.set_default_timeout(self.config.timeout)
            self._page.set_default_navigation_timeout(self.config.timeout)
        except Exception as e:
            self.logger.error(f"Failed to initialize browser: {e}")
            await self.close()
            raise

        self._state = SessionState.READY
        self.logger.info(
            f"Browser initialized: {engine.value} "
            f"(headless={self.config.headless}, slow_mo={self.config.slow_mo})"
        )

    async def navigate_to(self, url: str) -> None:
        """Navigate and wait for network idle. Errors propagate to the caller."""
        if self._state is not SessionState.READY:
            raise BrowserSessionError(
                f"Cannot navigate in state {self._state.value}; call initialize() first"
            )
        self.logger.info(f"Navigating to: {url}")
        await self._page.goto(url)
        await self._page.wait_for_load_state("networkidle")

    async def screenshot(self, name: Optional[str] = None) -> Path:
        """
        Capture the current page.

        Returns:
            Path to `<screenshots>/<name>_<timestamp>.png`
        """
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        directory = self.config.output_dir("screenshots")
        directory.mkdir(parents=True, exist_ok=True)

        path = directory / f"{name or 'screenshot'}_{timestamp}.png"
        await self.page.screenshot(path=str(path), full_page=True)
        self.logger.info(f"Screenshot saved: {path}")
        return path

    async def save_trace(self, name: str) -> Optional[Path]:
        """
        Stop tracing and write the archive.

        Returns:
            Path to `<traces>/<name>_<timestamp>.zip`, or None when not tracing
        """
        if not self._tracing or self._context is None:
            return None
        directory = self.config.output_dir("traces")
        directory.mkdir(parents=True, exist_ok=True)

        path = directory / f"{name}_{datetime.now().strftime(TIMESTAMP_FORMAT)}.zip"
        await self._context.tracing.stop(path=str(path))
        self._tracing = False
        self.logger.info(f"Trace saved: {path}")
        return path

    async def close(self) -> None:
        """
        Close page, context, browser and Playwright in that order.

        Safe to call repeatedly and after a partial initialize(). Close errors
        are logged and never raised.
        """
        if self._state is SessionState.CLOSED:
            return

        if self._tracing and self._context is not None:
            await self._close_quietly("tracing", self._context.tracing.stop())
            self._tracing = False

        if self._page is not None:
            await self._close_quietly("page", self._page.close())
            self._page = None
        if self._context is not None:
            await self._close_quietly("context", self._context.close())
            self._context = None
        if self._browser is not None:
            await self._close_quietly("browser", self._browser.close())
            self._browser = None
        if self._playwright is not None:
            await self._close_quietly("playwright", self._playwright.stop())
            self._playwright = None

        self._state = SessionState.CLOSED
        self.logger.info("Browser closed")

    async def _close_quietly(self, resource: str, closing) -> None:
        try:
            await closing
        except Exception as e:
            self.logger.error(f"Error closing {resource}: {e}")


__all__ = [
    "BrowserSession",
    "BrowserSessionError",
    "SessionState",
]
