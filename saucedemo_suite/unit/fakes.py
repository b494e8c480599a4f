"""
In-memory stand-ins for the Playwright objects the framework touches.

FakePage keeps a tiny DOM: a mapping of CSS selector to FakeElement lists.
Locators resolve lazily against it, so a page object built before a click
sees the elements added by that click.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


BASE_URL = "https://www.saucedemo.com/v1/index.html"


@dataclass
class FakeElement:
    text: str = ""
    visible: bool = True
    tag: str = "div"
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Dict[str, List["FakeElement"]] = field(default_factory=dict)
    on_click: Optional[Callable[[], None]] = None
    value: str = ""
    clicks: int = 0

    def full_text(self) -> str:
        parts = [self.text]
        for elements in self.children.values():
            parts.extend(e.full_text() for e in elements)
        return " ".join(p for p in parts if p)


class FakeLocator:
    def __init__(self, resolve: Callable[[], List[FakeElement]], description: str):
        self._resolve = resolve
        self.description = description

    def elements(self) -> List[FakeElement]:
        return list(self._resolve())

    def _single(self) -> FakeElement:
        elements = self.elements()
        if not elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.description}")
        if len(elements) > 1:
            raise PlaywrightError(f"strict mode violation: {self.description} resolved to {len(elements)}")
        return elements[0]

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(lambda: self.elements()[index:index + 1], f"{self.description} >> nth={index}")

    def filter(self, has_text: str) -> "FakeLocator":
        wanted = has_text.casefold()
        return FakeLocator(
            lambda: [e for e in self.elements() if wanted in e.full_text().casefold()],
            f"{self.description} >> has_text={has_text}",
        )

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(
            lambda: [child for e in self.elements() for child in e.children.get(selector, [])],
            f"{self.description} >> {selector}",
        )

    async def count(self) -> int:
        return len(self.elements())

    async def click(self, **kwargs) -> None:
        element = self._single()
        if not element.visible:
            raise PlaywrightTimeoutError(f"{self.description} is not visible")
        element.clicks += 1
        if element.on_click is not None:
            element.on_click()

    async def fill(self, value: str, **kwargs) -> None:
        self._single().value = value

    async def inner_text(self, **kwargs) -> str:
        return self._single().text

    async def all_inner_texts(self) -> List[str]:
        return [e.text for e in self.elements()]

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        elements = self.elements()
        if state == "visible" and not any(e.visible for e in elements):
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.description} to be visible")
        if state == "hidden" and any(e.visible for e in elements):
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.description} to be hidden")
        if state == "attached" and not elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.description} to be attached")

    async def is_visible(self) -> bool:
        elements = self.elements()
        return bool(elements) and elements[0].visible

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._single().attributes.get(name)

    async def evaluate(self, expression: str) -> str:
        return self._single().tag.upper()

    async def select_option(self, label: str) -> List[str]:
        element = self._single()
        element.value = label
        if element.on_click is not None:
            element.on_click()
        return [label]


class FakeTracing:
    def __init__(self):
        self.started = False
        self.stopped_with: List[Optional[str]] = []

    async def start(self, **options) -> None:
        self.started = True

    async def stop(self, path: Optional[str] = None) -> None:
        self.started = False
        self.stopped_with.append(path)
        if path:
            Path(path).write_bytes(b"trace")


class FakePage:
    def __init__(self, url: str = "about:blank", title: str = "Swag Labs"):
        self.url = url
        self.title_text = title
        self.dom: Dict[str, List[FakeElement]] = {}
        self.visited: List[str] = []
        self.load_states: List[str] = []
        self.pauses: List[int] = []
        self.screenshots: List[str] = []
        self.default_timeout: Optional[int] = None
        self.navigation_timeout: Optional[int] = None
        self.fail_goto = False
        self.fail_close = False
        self.closed = False

    def add(self, selector: str, *elements: FakeElement) -> List[FakeElement]:
        self.dom.setdefault(selector, []).extend(elements)
        return self.dom[selector]

    def remove(self, selector: str) -> None:
        self.dom.pop(selector, None)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(lambda: self.dom.get(selector, []), selector)

    async def title(self) -> str:
        return self.title_text

    async def goto(self, url: str, **kwargs) -> None:
        if self.fail_goto:
            raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.url = url
        self.visited.append(url)

    async def wait_for_url(self, pattern: str, timeout: Optional[float] = None) -> None:
        if not fnmatch(self.url, pattern):
            raise PlaywrightTimeoutError(f"Timeout waiting for URL {pattern} (at {self.url})")

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.load_states.append(state)

    async def wait_for_timeout(self, timeout: int) -> None:
        self.pauses.append(timeout)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        if path:
            Path(path).write_bytes(b"\x89PNG")
            self.screenshots.append(path)
        return b"\x89PNG"

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: int) -> None:
        self.navigation_timeout = timeout

    async def close(self) -> None:
        if self.fail_close:
            raise PlaywrightError("Target page has been closed")
        self.closed = True


class FakeContext:
    def __init__(self, page: FakePage, options: dict):
        self.page = page
        self.options = options
        self.tracing = FakeTracing()
        self.closed = False

    async def new_page(self) -> FakePage:
        return self.page

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self, page: FakePage):
        self._page = page
        self.contexts: List[FakeContext] = []
        self.closed = False
        self.fail_new_context = False

    async def new_context(self, **options) -> FakeContext:
        if self.fail_new_context:
            raise PlaywrightError("Browser has been closed")
        context = FakeContext(self._page, options)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True


class FakeLauncher:
    def __init__(self, name: str, page: FakePage):
        self.name = name
        self.browser = FakeBrowser(page)
        self.launch_options: Optional[dict] = None

    async def launch(self, **options) -> FakeBrowser:
        self.launch_options = options
        return self.browser


class FakePlaywright:
    """Plays both the async_playwright() manager and the started Playwright."""

    def __init__(self, page: Optional[FakePage] = None):
        self.page = page or FakePage()
        self.chromium = FakeLauncher("chromium", self.page)
        self.firefox = FakeLauncher("firefox", self.page)
        self.webkit = FakeLauncher("webkit", self.page)
        self.started = False
        self.stopped = False

    async def start(self) -> "FakePlaywright":
        self.started = True
        return self

    async def stop(self) -> None:
        self.stopped = True

    def factory(self) -> Callable[[], "FakePlaywright"]:
        return lambda: self
