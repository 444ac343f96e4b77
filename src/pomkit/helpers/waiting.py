"""
Wait Helpers

Explicit wait policy and a bounded poll-until-condition primitive.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from pydantic import BaseModel, Field, model_validator

from pomkit.config.settings import get_settings

T = TypeVar("T")


class WaitPolicy(BaseModel):
    """Timeout and polling interval applied to every page operation."""

    model_config = {"frozen": True}

    timeout_ms: float = Field(..., gt=0, description="Maximum time to wait")
    poll_interval_ms: float = Field(..., gt=0, description="Time between polls")

    @model_validator(mode="after")
    def check_interval_within_timeout(self) -> WaitPolicy:
        if self.poll_interval_ms > self.timeout_ms:
            raise ValueError("poll_interval_ms must not exceed timeout_ms")
        return self

    @classmethod
    def from_settings(cls) -> WaitPolicy:
        """Build the policy from the cached settings."""
        settings = get_settings()
        return cls(
            timeout_ms=settings.default_timeout_ms,
            poll_interval_ms=min(settings.poll_interval_ms, settings.default_timeout_ms),
        )

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000

    @property
    def poll_interval_s(self) -> float:
        return self.poll_interval_ms / 1000


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        TimeoutError: If condition not met within timeout

    Example:
        # Wait for the cart badge to show two items
        count = wait_for_condition(
            action=lambda: page.locator("#cart-count").inner_text(),
            condition=lambda text: text == "2",
            timeout_seconds=5.0
        )
    """
    deadline = time.monotonic() + timeout_seconds

    # action always runs at least once, and once more at the deadline
    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break

        time.sleep(min(poll_interval_seconds, remaining))

    raise TimeoutError(f"{error_message}. Last result: {last_result}")
