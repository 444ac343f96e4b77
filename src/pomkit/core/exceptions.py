"""pomkit exception hierarchy.

Only wiring and configuration defects get a pomkit exception. Browser
wait-timeouts and assertion failures are left as Playwright raises them
so they surface as ordinary failing tests.
"""


class PomKitError(Exception):
    """Base exception for all pomkit errors.

    All custom exceptions in pomkit should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(PomKitError):
    """Raised when configuration is invalid or missing.

    Use this for locator sets without a required selector, unknown page
    names, or any settings-related problems.

    Example:
        raise ConfigurationError("Missing required locator: header.logo_link")
    """

    pass


class PageContractError(PomKitError):
    """Raised when a page registry entry cannot be used for navigation.

    Either no page object is registered under the name, or the registered
    object does not implement ``validate_page_loaded()``.

    Attributes:
        page_name: Registry key that was looked up.
        reason: Human-readable description of the violation.

    Example:
        raise PageContractError(page_name="homePage", reason="not registered")
    """

    def __init__(self, page_name: str, reason: str) -> None:
        self.page_name = page_name
        self.reason = reason
        super().__init__(f"{page_name}: {reason}")
