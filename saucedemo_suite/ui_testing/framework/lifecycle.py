"""
================================================================================
Test Lifecycle
================================================================================

Suite-level and per-test setup/teardown shared by every UI scenario.

- SuiteContext: built once per pytest session (per xdist worker). Owns the
  configuration, fixture data and report generator.
- TestRun: built once per test. Owns one BrowserSession and the six page
  objects bound to it, and records exactly one TestResult on teardown.

================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from loguru import logger

from saucedemo_tools.common import init_logger
from saucedemo_tools.report_tools.allure_utils import attach_file, attach_json
from saucedemo_tools.report_tools.report_generator import (
    ReportGenerator,
    TestResult,
    TestStatus,
)

from .browser_manager import BrowserSession
from .config_loader import ConfigLoader
from .data_provider import TestDataProvider
from .models import CustomerInfo
from .suite_logger import TestLogger


DEFAULT_CATEGORY = "General"


def safe_file_name(name: str) -> str:
    """Test ids contain brackets and slashes; keep them out of file names."""
    return re.sub(r"[^\w.-]+", "_", name).strip("_") or "test"


def status_from_report(report: Any) -> Tuple[TestStatus, str]:
    """
    Map a pytest phase report to a result status and error message.

    xfail outcomes are recorded as INCONCLUSIVE.
    """
    if report is None:
        return TestStatus.SKIPPED, ""
    if hasattr(report, "wasxfail"):
        return TestStatus.INCONCLUSIVE, str(report.wasxfail or "")
    if report.passed:
        return TestStatus.PASSED, ""
    if report.skipped:
        longrepr = report.longrepr
        if isinstance(longrepr, tuple) and len(longrepr) == 3:
            return TestStatus.SKIPPED, str(longrepr[2])
        return TestStatus.SKIPPED, ""

    crash = getattr(report.longrepr, "reprcrash", None)
    message = getattr(crash, "message", None) or getattr(report, "longreprtext", "")
    return TestStatus.FAILED, str(message).strip()


def category_of(item: Any) -> str:
    """Category from the closest `category("...")` marker."""
    marker = item.get_closest_marker("category")
    if marker is None or not marker.args:
        return DEFAULT_CATEGORY
    return str(marker.args[0])


def outcome_of(item: Any) -> Tuple[TestStatus, str]:
    """Outcome of a pytest item from the `rep_<phase>` attributes stored on it."""
    setup_report = getattr(item, "rep_setup", None)
    if setup_report is not None and not setup_report.passed:
        return status_from_report(setup_report)
    return status_from_report(getattr(item, "rep_call", None))


class SuiteContext:
    """
    Process-wide resources for one test session.

    Usage:
        >>> suite = SuiteContext.create()
        >>> ...
        >>> suite.finish()
    """

    def __init__(
        self,
        config: ConfigLoader,
        data: TestDataProvider,
        reports: ReportGenerator,
        logger: Optional[TestLogger] = None,
    ):
        self.config = config
        self.data = data
        self.reports = reports
        self.logger = logger or TestLogger("suite")
        self.started_at = datetime.now()

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "SuiteContext":
        """Load configuration and fixture data; fails fast when either is unusable."""
        config = ConfigLoader(config_path)

        logging_config = config.get_section("logging")
        log_file = logging_config.get("file")
        init_logger(
            level=str(config.get("logging.level", "INFO")),
            log_file=config.resolve_path(log_file) if log_file else None,
            rotation=str(logging_config.get("rotation", "1 day")),
            retention=str(logging_config.get("retention", "7 days")),
        )

        data = TestDataProvider(config.test_data_path, seed=config.test_data_seed)
        reports = ReportGenerator(report_dir=config.output_dir("reports"))
        suite = cls(config, data, reports)
        suite.log_run_metadata()
        return suite

    def log_run_metadata(self) -> None:
        self.logger.info("=" * 60)
        self.logger.info("SauceDemo test run started")
        for key, value in self.config.describe().items():
            self.logger.info(f"  {key}: {value}")
        self.logger.info(f"  test_data_seed: {self.data.seed}")
        self.logger.info(f"  report_session: {self.reports.session_id}")
        self.logger.info("=" * 60)

    def finish(self) -> None:
        """Write reports and release resources. Errors are logged, not raised."""
        summary = self.reports.summary()
        self.logger.info(
            f"Test run finished: {summary.total} tests, {summary.passed} passed, "
            f"{summary.failed} failed, {summary.skipped} skipped "
            f"({summary.success_rate:.1f}% success)"
        )
        try:
            for path in self.reports.generate_all_reports():
                self.logger.info(f"Report written: {path}")
        except Exception as e:
            self.logger.error(f"Report generation failed: {e}")
        finally:
            self.data.close()
            logger.complete()


class TestRun:
    """
    Per-test lifecycle: fresh browser session, page objects, one result.

    Usage:
        run = TestRun(suite, "test_valid_login", category="Login")
        await run.setup()
        products = await run.login("StandardUser")
        await run.teardown(TestStatus.PASSED)
    """

    __test__ = False

    def __init__(
        self,
        suite: SuiteContext,
        name: str,
        category: str = DEFAULT_CATEGORY,
        session_factory: Callable[..., BrowserSession] = BrowserSession,
    ):
        self.suite = suite
        self.config = suite.config
        self.data = suite.data
        self.name = name
        self.category = category or DEFAULT_CATEGORY
        self.logger = suite.logger.child(name)
        self._session_factory = session_factory

        self.session: Optional[BrowserSession] = None
        self.start_time: Optional[datetime] = None
        self.result: Optional[TestResult] = None

        self.login_page = None
        self.products_page = None
        self.cart_page = None
        self.checkout_step_one_page = None
        self.checkout_step_two_page = None
        self.checkout_complete_page = None

    async def setup(self) -> None:
        """Start a browser, bind the page objects and open the landing page."""
        from saucedemo_suite.ui_testing.pages import (
            CartPage,
            CheckoutCompletePage,
            CheckoutStepOnePage,
            CheckoutStepTwoPage,
            LoginPage,
            ProductsPage,
        )

        self.start_time = datetime.now()
        self.logger.info(f"Starting test: {self.name} [{self.category}]")

        self.session = self._session_factory(self.config, self.logger)
        try:
            await self.session.initialize()
            page = self.session.page
            self.login_page = LoginPage(page, self.logger, self.config)
            self.products_page = ProductsPage(page, self.logger, self.config)
            self.cart_page = CartPage(page, self.logger, self.config)
            self.checkout_step_one_page = CheckoutStepOnePage(page, self.logger, self.config)
            self.checkout_step_two_page = CheckoutStepTwoPage(page, self.logger, self.config)
            self.checkout_complete_page = CheckoutCompletePage(page, self.logger, self.config)

            await self.session.navigate_to(self.config.base_url)
        except Exception as e:
            self.logger.error(f"Test setup failed: {e}")
            await self._capture_screenshot("setup_failure")
            raise

    async def teardown(self, status: TestStatus, message: str = "") -> TestResult:
        """
        Capture failure artifacts, close the browser and record the result.

        Never raises; the result is recorded even when the steps before fail.
        """
        screenshot = ""
        try:
            if status is TestStatus.FAILED:
                self.logger.error(f"Test failed: {self.name}: {message}")
                screenshot = await self._capture_failure_artifacts()
            await self._close_session()
        except Exception as e:
            self.logger.error(f"Error during teardown: {e}")
        finally:
            self.result = TestResult(
                test_name=self.name,
                category=self.category,
                status=status,
                browser=self.config.browser.value,
                start_time=self.start_time or datetime.now(),
                end_time=datetime.now(),
                error_message=message or "",
                screenshot_path=screenshot,
            )
            self.suite.reports.add_test_result(self.result)
            self.logger.info(f"Test finished: {self.name} - {status.value}")
        return self.result

    async def _capture_failure_artifacts(self) -> str:
        attach_json(
            {
                "test": self.name,
                "category": self.category,
                "browser": self.config.browser.value,
                "url": self.session.current_url if self.session is not None else "",
            },
            name="Failure context",
        )
        screenshot = ""
        if self.config.screenshot_on_failure:
            path = await self._capture_screenshot("failure")
            screenshot = str(path) if path else ""
        if self.config.trace_on_failure and self.session is not None:
            try:
                trace = await self.session.save_trace(safe_file_name(self.name))
            except Exception as e:
                self.logger.error(f"Failed to save trace: {e}")
            else:
                if trace:
                    attach_file(trace, name="trace")
        return screenshot

    async def _capture_screenshot(self, label: str) -> Optional[Path]:
        if self.session is None or not self.config.screenshot_on_failure:
            return None
        try:
            path = await self.session.screenshot(f"{safe_file_name(self.name)}_{label}")
        except Exception as e:
            self.logger.error(f"Failed to capture screenshot: {e}")
            return None
        attach_file(path, name=label)
        return path

    async def _close_session(self) -> None:
        if self.session is None:
            return
        try:
            await self.session.close()
        except Exception as e:
            self.logger.error(f"Error closing browser session: {e}")

    # =========================================================================
    # Scenario Shortcuts
    # =========================================================================

    async def login(self, user_type: str = "StandardUser"):
        """Log in with a named credential set; returns the products page."""
        credentials = self.config.get_credentials(user_type)
        self.logger.step(f"Login as {user_type}")
        self.products_page = await self.login_page.login(credentials)
        return self.products_page

    async def complete_checkout(
        self,
        user_type: str,
        product_name: str,
        customer: Optional[CustomerInfo] = None,
    ):
        """
        Login, buy one product and finish the order.

        Returns:
            CheckoutCompletePage
        """
        products = await self.login(user_type)
        await products.add_product_to_cart(product_name)
        self.cart_page = await products.go_to_cart()
        self.checkout_step_one_page = await self.cart_page.proceed_to_checkout()

        customer = customer or self.data.get_random_customer_record()
        await self.checkout_step_one_page.fill_checkout_form(customer)
        self.checkout_step_two_page = await self.checkout_step_one_page.continue_to_step_two()
        self.checkout_complete_page = await self.checkout_step_two_page.finish_checkout()
        return self.checkout_complete_page

    async def logout(self):
        self.login_page = await self.products_page.logout()
        return self.login_page


__all__ = [
    "DEFAULT_CATEGORY",
    "category_of",
    "SuiteContext",
    "TestRun",
    "outcome_of",
    "safe_file_name",
    "status_from_report",
]
