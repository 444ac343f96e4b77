"""pomkit: Playwright page-object base classes."""

from pomkit.core.exceptions import ConfigurationError, PageContractError, PomKitError
from pomkit.helpers.waiting import WaitPolicy, wait_for_condition
from pomkit.locators import HeaderLocators, LocatorGroup, Locators
from pomkit.pages import BasePage, HomePage, PageName, PageRegistry, ValidatablePage

__version__ = "0.1.0"

__all__ = [
    "BasePage",
    "ConfigurationError",
    "HeaderLocators",
    "HomePage",
    "LocatorGroup",
    "Locators",
    "PageContractError",
    "PageName",
    "PageRegistry",
    "PomKitError",
    "ValidatablePage",
    "WaitPolicy",
    "wait_for_condition",
]
