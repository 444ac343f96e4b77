"""Page registry: page objects reachable by navigation from the current page."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Protocol, runtime_checkable

from pomkit.core.exceptions import ConfigurationError, PageContractError


class PageName(str, Enum):
    """Identifiers of pages a page object can navigate to."""

    HOME_PAGE = "homePage"

    @classmethod
    def parse(cls, value: PageName | str) -> PageName:
        try:
            return cls(value)
        except ValueError as e:
            raise ConfigurationError(f"Unknown page name: {value!r}") from e


@runtime_checkable
class ValidatablePage(Protocol):
    """Anything that can confirm its page finished loading."""

    def validate_page_loaded(self) -> None: ...


class PageRegistry(Mapping[PageName, ValidatablePage]):
    """Immutable mapping of page names to already-constructed page objects.

    Entries are checked against ``ValidatablePage`` on construction, so a
    wiring mistake fails when the registry is built rather than mid-test.
    """

    def __init__(self, pages: Mapping[PageName | str, object] | None = None) -> None:
        entries: dict[PageName, ValidatablePage] = {}
        for raw_name, page in (pages or {}).items():
            name = PageName.parse(raw_name)
            entries[name] = _check_contract(name, page)
        self._pages = entries

    def __getitem__(self, name: PageName | str) -> ValidatablePage:
        try:
            page_name = PageName(name)
        except ValueError:
            raise KeyError(name) from None
        return self._pages[page_name]

    def __iter__(self) -> Iterator[PageName]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        names = ", ".join(name.value for name in self._pages)
        return f"PageRegistry({names})"

    def require(self, name: PageName | str) -> ValidatablePage:
        """Return the page registered under ``name``.

        Raises:
            PageContractError: If no page is registered under the name.
        """
        page_name = PageName.parse(name)
        try:
            return self._pages[page_name]
        except KeyError:
            raise PageContractError(
                page_name=page_name.value, reason="no page object registered"
            ) from None

    def with_page(self, name: PageName | str, page: object) -> PageRegistry:
        """Return a new registry with ``page`` added under ``name``."""
        merged: dict[PageName | str, object] = dict(self._pages)
        merged[PageName.parse(name)] = page
        return PageRegistry(merged)


def _check_contract(name: PageName, page: object) -> ValidatablePage:
    if not isinstance(page, ValidatablePage) or not callable(page.validate_page_loaded):
        raise PageContractError(
            page_name=name.value,
            reason=f"{type(page).__name__} does not implement validate_page_loaded()",
        )
    return page
