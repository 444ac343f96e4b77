"""Home page object."""

from __future__ import annotations

from pomkit.locators import Locators
from pomkit.pages.base_page import BasePage


class HomePage(BasePage[Locators]):
    """Landing page reached through the header logo link.

    Applications subclass this to add home-page-specific locators and
    actions; the shared validation and navigation come from ``BasePage``.
    """
