"""
Wait Helpers

Usage:
    from pomkit.helpers import WaitPolicy, wait_for_condition
"""

from pomkit.helpers.waiting import WaitPolicy, wait_for_condition

__all__ = ["WaitPolicy", "wait_for_condition"]
