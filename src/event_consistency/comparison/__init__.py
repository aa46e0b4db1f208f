"""Comparison module - event record comparator."""

from .comparator import (
    DEFAULT_ALIAS_RULES,
    AliasRule,
    EventComparator,
    compare_events,
    grade_for_issue_count,
)

__all__ = [
    "DEFAULT_ALIAS_RULES",
    "AliasRule",
    "EventComparator",
    "compare_events",
    "grade_for_issue_count",
]
