"""
Base Page class for the Page Object Model.

Holds the Playwright page, the page's locator set and the registry of
pages reachable from it, and provides the validation and navigation
helpers every concrete page object shares.

Usage:
    home = HomePage(page, locators)
    about = AboutPage(page, locators, {PageName.HOME_PAGE: home})

    about.open("/about")
    about.expect_logo_visible()
    home = about.navigate_to_home_page()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from playwright.sync_api import Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from pomkit.config.logging import get_logger
from pomkit.config.settings import get_settings
from pomkit.helpers.waiting import WaitPolicy, wait_for_condition
from pomkit.locators import Locators
from pomkit.pages.registry import PageName, PageRegistry

if TYPE_CHECKING:
    from pomkit.pages.home_page import HomePage

log = get_logger(__name__)

L = TypeVar("L", bound=Locators)


class BasePage(Generic[L]):
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page this object drives.
        locators: Selectors for the page's structure.
        available_pages: Page objects reachable by navigation.
        wait_policy: Timeouts used by every operation.
    """

    def __init__(
        self,
        page: Page,
        locators: L,
        available_pages: PageRegistry | Mapping[PageName | str, object] | None = None,
        wait_policy: WaitPolicy | None = None,
    ) -> None:
        self._page = page
        self._locators = locators
        self._available_pages = _as_registry(available_pages)
        self._wait_policy = wait_policy or WaitPolicy.from_settings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pages={self._available_pages!r})"

    @property
    def page(self) -> Page:
        return self._page

    @property
    def locators(self) -> L:
        return self._locators

    @property
    def available_pages(self) -> PageRegistry:
        return self._available_pages

    @property
    def wait_policy(self) -> WaitPolicy:
        return self._wait_policy

    def bind_pages(
        self, available_pages: PageRegistry | Mapping[PageName | str, object]
    ) -> BasePage[L]:
        """Replace the registry, for page objects that link to each other.

        Returns:
            self, so construction and wiring can be chained.
        """
        self._available_pages = _as_registry(available_pages)
        return self

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_page_loaded(self) -> None:
        """Wait until the header logo link appears on the page.

        Raises:
            playwright.sync_api.TimeoutError: If it never appears.
        """
        selector = self._locators.header.logo_link
        log.debug("page_load_validation_started", page_object=self._name, selector=selector)

        try:
            self._page.wait_for_selector(selector, timeout=self._wait_policy.timeout_ms)
        except PlaywrightTimeoutError:
            log.warning(
                "page_load_validation_timeout",
                page_object=self._name,
                selector=selector,
                timeout_ms=self._wait_policy.timeout_ms,
            )
            raise

        log.debug("page_load_validation_passed", page_object=self._name, selector=selector)

    def expect_logo_visible(self) -> None:
        """Assert the header logo is visible once network activity settles.

        Raises:
            AssertionError: If the logo is hidden, zero-sized or missing.
        """
        selector = self._locators.header.logo_link
        log.debug("logo_visibility_check_started", page_object=self._name, selector=selector)

        self._page.wait_for_load_state("networkidle", timeout=self._wait_policy.timeout_ms)
        logo = self._page.locator(selector)
        expect(logo).to_be_visible(timeout=self._wait_policy.timeout_ms)

    def wait_until(
        self,
        condition: Callable[[], bool],
        message: str = "Page condition not met within timeout",
    ) -> None:
        """Poll ``condition`` with this page's wait policy.

        Raises:
            TimeoutError: If the condition stays false for the whole timeout.
        """
        wait_for_condition(
            action=condition,
            condition=bool,
            timeout_seconds=self._wait_policy.timeout_s,
            poll_interval_seconds=self._wait_policy.poll_interval_s,
            error_message=f"{self._name}: {message}",
        )

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def open(self, path: str = "") -> None:
        """Go to ``path`` under the configured base URL and validate the load.

        Raises:
            playwright.sync_api.TimeoutError: If navigation or validation times out.
        """
        settings = get_settings()
        if path and not path.startswith("/"):
            path = f"/{path}"
        url = f"{settings.base_url}{path}"

        self._page.goto(url, timeout=settings.navigation_timeout_ms)
        log.info("page_opened", page_object=self._name, url=url)

        self.validate_page_loaded()

    def navigate_to_home_page(self) -> HomePage:
        """Click the header logo and return the validated home page.

        The home page is re-validated on every call; there is no
        already-loaded shortcut.

        Raises:
            PageContractError: If no home page is registered.
        """
        selector = self._locators.header.logo_link
        self._page.locator(selector).click(timeout=self._wait_policy.timeout_ms)
        log.info("home_navigation_clicked", page_object=self._name, selector=selector)

        home_page = self._available_pages.require(PageName.HOME_PAGE)
        home_page.validate_page_loaded()

        log.info(
            "home_navigation_completed",
            page_object=self._name,
            destination=type(home_page).__name__,
        )
        return cast("HomePage", home_page)

    @property
    def _name(self) -> str:
        return type(self).__name__


def _as_registry(
    available_pages: PageRegistry | Mapping[PageName | str, object] | None,
) -> PageRegistry:
    if isinstance(available_pages, PageRegistry):
        return available_pages
    return PageRegistry(available_pages)
