"""
Page Objects

Sample application page objects used to exercise pomkit's base classes.

Usage:
    from tests.support.page_objects import AboutPage, AboutLocators
"""

from tests.support.page_objects.about_page import AboutPage, AboutLocators

__all__ = ["AboutPage", "AboutLocators"]
