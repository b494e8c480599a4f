"""
================================================================================
Login Feature UI Tests (Async / Playwright)
================================================================================

Valid logins for every accepted user type and the four rejected-login
paths (empty username, empty password, unknown user, locked-out user).

================================================================================
"""

import allure
import pytest

from saucedemo_suite.ui_testing.framework.lifecycle import TestRun
from saucedemo_suite.ui_testing.framework.models import Credentials


pytestmark = pytest.mark.category("Login")


@allure.epic("UI Testing")
@allure.feature("Authentication")
class TestLogin:
    """Login UI test suite (async)."""

    @allure.story("Happy Path")
    @allure.title("Login succeeds with the standard user")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_with_valid_standard_user(self, app: TestRun):
        """Verify the standard user lands on the products screen."""
        products = await app.login("StandardUser")

        with allure.step("Verify products page loaded"):
            assert await products.is_products_page_displayed(), "Products page should be displayed"
            assert "inventory.html" in app.session.current_url

    @allure.story("Negative Path")
    @allure.title("Login fails for the locked-out user")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_with_locked_out_user(self, app: TestRun, test_data):
        credentials = app.config.get_credentials("LockedOutUser")

        login_page = await app.login_page.login_with_invalid_credentials(credentials)

        assert await login_page.is_error_message_displayed()
        expected = test_data.get_error_message("LockedOutUser")
        actual = await login_page.get_error_message()
        app.logger.assertion("Locked-out error message", expected, actual, actual == expected)
        assert actual == expected
        assert await login_page.is_login_page_displayed(), "No navigation expected"

    @allure.story("Negative Path")
    @allure.title("Login fails with invalid credentials")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_login_with_invalid_credentials(self, app: TestRun, test_data):
        credentials = Credentials(username="invalid_user", password="invalid_password")

        login_page = await app.login_page.login_with_invalid_credentials(credentials)

        assert await login_page.is_error_message_displayed()
        assert await login_page.get_error_message() == test_data.get_error_message("InvalidCredentials")

    @allure.story("Form Validation")
    @allure.title("Login fails with empty username")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_login_with_empty_username(self, app: TestRun, test_data):
        credentials = Credentials(username="", password="secret_sauce")

        login_page = await app.login_page.login_with_invalid_credentials(credentials)

        assert await login_page.get_error_message() == test_data.get_error_message("LoginRequired")

    @allure.story("Form Validation")
    @allure.title("Login fails with empty password")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_login_with_empty_password(self, app: TestRun, test_data):
        credentials = Credentials(username="standard_user", password="")

        login_page = await app.login_page.login_with_invalid_credentials(credentials)

        assert await login_page.get_error_message() == test_data.get_error_message("PasswordRequired")

    @allure.story("Page Layout")
    @allure.title("Login page shows all required elements")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_login_page_displays_required_elements(self, app: TestRun):
        login_page = app.login_page

        assert await login_page.is_login_page_displayed()
        assert await login_page.is_element_visible(login_page.username_input)
        assert await login_page.is_element_visible(login_page.password_input)
        assert await login_page.is_element_visible(login_page.login_button)

    @allure.story("Happy Path")
    @allure.title("Login succeeds for {user_type}")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_type", ["ProblemUser", "PerformanceGlitchUser"])
    async def test_login_with_other_valid_users(self, app: TestRun, user_type: str):
        products = await app.login(user_type)

        assert await products.is_on_page(), f"{user_type} should reach the products page"
