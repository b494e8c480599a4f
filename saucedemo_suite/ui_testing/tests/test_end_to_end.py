"""
================================================================================
End-to-End UI Workflows (Async / Playwright)
================================================================================

Multi-screen user journeys chaining page-object transitions from login to
logout.

================================================================================
"""

import allure
import pytest

from saucedemo_suite.ui_testing.framework.lifecycle import TestRun
from saucedemo_suite.ui_testing.framework.models import Credentials


pytestmark = [pytest.mark.category("EndToEnd"), pytest.mark.e2e]

BACKPACK = "Sauce Labs Backpack"
THREE_PRODUCTS = [BACKPACK, "Sauce Labs Bike Light", "Sauce Labs Bolt T-Shirt"]


@allure.epic("UI Testing")
@allure.feature("End-to-End Journeys")
class TestEndToEnd:
    """End-to-end UI workflows (async)."""

    @allure.story("Purchase")
    @allure.title("Login, buy one product, checkout and logout")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_complete_user_journey(self, app: TestRun, test_data):
        app.logger.step("Starting complete user journey")

        with allure.step("Login and add product"):
            products = await app.login("StandardUser")
            assert await products.is_on_page()
            await products.add_product_to_cart(BACKPACK)
            assert await products.get_cart_item_count() == 1

        with allure.step("Review cart"):
            cart = await products.go_to_cart()
            assert BACKPACK in await cart.get_cart_item_names()
            assert await cart.get_cart_item_count() == 1

        with allure.step("Enter customer information"):
            step_one = await cart.proceed_to_checkout()
            customer = test_data.get_random_customer_record()
            await step_one.fill_checkout_form(customer)

        with allure.step("Review order overview"):
            step_two = await step_one.continue_to_step_two()
            assert BACKPACK in await step_two.get_checkout_item_names()
            assert await step_two.get_checkout_item_count() == 1
            summary = await step_two.get_order_summary()
            assert summary.is_complete(), f"Totals missing: {summary}"

        with allure.step("Finish order"):
            complete = await step_two.finish_checkout()
            header = await complete.get_complete_header()
            assert complete.THANK_YOU_PHRASE.casefold() in header.casefold()
            assert await complete.verify_order_completion()

        with allure.step("Back to products and logout"):
            app.products_page = await complete.back_to_products()
            assert await app.products_page.is_on_page()
            login_page = await app.logout()
            assert await login_page.is_login_page_displayed()

    @allure.story("Purchase")
    @allure.title("Checkout with several products")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_multiple_products_checkout(self, app: TestRun, test_data):
        products = await app.login("StandardUser")
        for name in THREE_PRODUCTS:
            await products.add_product_to_cart(name)
        assert await products.get_cart_item_count() == len(THREE_PRODUCTS)

        cart = await products.go_to_cart()
        names = await cart.get_cart_item_names()
        assert all(name in names for name in THREE_PRODUCTS)

        step_one = await cart.proceed_to_checkout()
        await step_one.fill_checkout_form(test_data.get_random_customer_record())
        step_two = await step_one.continue_to_step_two()
        assert await step_two.get_checkout_item_count() == len(THREE_PRODUCTS)

        complete = await step_two.finish_checkout()
        assert await complete.verify_order_completion()

    @allure.story("Browsing")
    @allure.title("Sort by every option, then add the first product")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_product_sorting_and_selection(self, app: TestRun, test_data):
        products = await app.login("StandardUser")

        for option in test_data.get_sort_options():
            await products.sort_products(option)
            assert await products.get_product_names(), f"No products after sorting by {option}"

        await products.sort_products("Name (A to Z)")
        first = (await products.get_product_names())[0]
        await products.add_product_to_cart(first)

        assert await products.get_cart_item_count() == 1

    @allure.story("Cart")
    @allure.title("Add, remove and continue shopping")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_cart_management_workflow(self, app: TestRun):
        products = await app.login("StandardUser")
        for name in THREE_PRODUCTS:
            await products.add_product_to_cart(name)

        cart = await products.go_to_cart()
        assert await cart.get_cart_item_count() == len(THREE_PRODUCTS)

        await cart.remove_item_from_cart(THREE_PRODUCTS[0])
        assert await cart.get_cart_item_count() == len(THREE_PRODUCTS) - 1

        products = await cart.continue_shopping()
        assert await products.is_on_page()

        await products.add_product_to_cart("Sauce Labs Fleece Jacket")
        assert await products.get_cart_item_count() == len(THREE_PRODUCTS)

    @allure.story("Access")
    @allure.title("Every accepted user type can shop")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_different_user_types_have_access(self, app: TestRun):
        for user_type in ("StandardUser", "ProblemUser", "PerformanceGlitchUser"):
            app.logger.step(f"Testing user type: {user_type}")

            products = await app.login(user_type)
            assert await products.is_on_page(), f"{user_type} should reach the products page"

            names = await products.get_product_names()
            assert names, f"{user_type} should see products"

            before = await products.get_cart_item_count()
            await products.add_product_to_cart(names[0])
            assert await products.get_cart_item_count() == before + 1

            await products.reset_app_state()
            await app.logout()

    @allure.story("Errors")
    @allure.title("Rejected logins show the matching error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_invalid_login_attempts_show_errors(self, app: TestRun, test_data):
        attempts = [
            (Credentials("", "secret_sauce"), "LoginRequired"),
            (Credentials("standard_user", ""), "PasswordRequired"),
            (Credentials("invalid_user", "invalid_password"), "InvalidCredentials"),
            (Credentials("locked_out_user", "secret_sauce"), "LockedOutUser"),
        ]
        login_page = app.login_page

        for credentials, message_key in attempts:
            app.logger.step(f"Invalid login attempt: {credentials}")

            login_page = await login_page.login_with_invalid_credentials(credentials)
            assert await login_page.is_error_message_displayed()
            assert await login_page.get_error_message() == test_data.get_error_message(message_key)

            await login_page.clear_form()
