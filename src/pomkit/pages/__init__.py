"""
Page Objects

Page Object Model (POM) base classes for Playwright end-to-end tests.
Encapsulates page interactions and locators.

Usage:
    from pomkit.pages import HomePage, PageName

    home = HomePage(page, locators)
    home.validate_page_loaded()

Pattern:
    - One class per page/major component
    - Methods for actions (click, fill)
    - Locator sets for selectors
    - Assertions as methods
"""

from pomkit.pages.base_page import BasePage
from pomkit.pages.home_page import HomePage
from pomkit.pages.registry import PageName, PageRegistry, ValidatablePage

__all__ = ["BasePage", "HomePage", "PageName", "PageRegistry", "ValidatablePage"]
