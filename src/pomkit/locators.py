"""Locator sets.

A locator set maps semantic element names to selector strings. Sets are
frozen pydantic models so application page objects can widen the shape by
subclassing while ``BasePage`` only depends on ``header.logo_link``.

Usage:
    locators = Locators.from_mapping({"header": {"logo_link": "a.logo"}})
    locators.header.logo_link      # "a.logo"
    locators.selector("header.logo_link")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from pomkit.core.exceptions import ConfigurationError


class LocatorGroup(BaseModel):
    """Base for a named group of selectors (header, footer, sidebar...)."""

    model_config = {"frozen": True, "validate_by_name": True, "extra": "forbid"}

    @field_validator("*", mode="before")
    @classmethod
    def strip_selector(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("selector must not be empty")
        return v


class HeaderLocators(LocatorGroup):
    """Selectors for the shared page header."""

    logo_link: str = Field(..., alias="logoLink", description="Logo link back to home")


class Locators(LocatorGroup):
    """Root locator set every page object is built with."""

    header: HeaderLocators

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Locators:
        """Build a locator set from nested mappings.

        Raises:
            ConfigurationError: If a required selector is missing or empty.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid locator set for {cls.__name__}: {e}") from e

    def selector(self, name: str) -> str:
        """Look up a selector by dotted name, e.g. ``"header.logo_link"``.

        Raises:
            ConfigurationError: If the name does not resolve to a selector.
        """
        node: Any = self
        for part in name.split("."):
            if not isinstance(node, BaseModel):
                raise ConfigurationError(f"Unknown locator: {name}")
            field_name = _field_name(node, part)
            if field_name is None:
                raise ConfigurationError(f"Unknown locator: {name}")
            node = getattr(node, field_name)

        if not isinstance(node, str):
            raise ConfigurationError(f"Locator {name} is a group, not a selector")
        return node


def _field_name(model: BaseModel, part: str) -> str | None:
    fields = type(model).model_fields
    if part in fields:
        return part
    for field_name, info in fields.items():
        if info.alias == part:
            return field_name
    return None
