"""
Test Fixtures

HTML documents loaded with ``page.set_content()`` in browser tests.
"""

from tests.support.fixtures.documents import (
    HIDDEN_LOGO_DOCUMENT,
    LOGO_SELECTOR,
    MISSING_LOGO_DOCUMENT,
    SITE_DOCUMENTS,
    VISIBLE_LOGO_DOCUMENT,
    ZERO_SIZE_LOGO_DOCUMENT,
)

__all__ = [
    "HIDDEN_LOGO_DOCUMENT",
    "LOGO_SELECTOR",
    "MISSING_LOGO_DOCUMENT",
    "SITE_DOCUMENTS",
    "VISIBLE_LOGO_DOCUMENT",
    "ZERO_SIZE_LOGO_DOCUMENT",
]
