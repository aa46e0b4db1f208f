"""Event consistency checker - compare two JSON events and grade their alignment."""

from event_consistency.checker import ConsistencyChecker, load_example_pair
from event_consistency.comparison.comparator import (
    DEFAULT_ALIAS_RULES,
    AliasRule,
    EventComparator,
    compare_events,
)
from event_consistency.domain.issue import Issue, IssueKind
from event_consistency.domain.result import ComparisonResult, ConsistencyGrade
from event_consistency.exceptions import (
    ConfigurationError,
    EventConsistencyError,
    MalformedEventError,
)
from event_consistency.reporting.formatter import format_result

__version__ = "1.0.0"

__all__ = [
    "ConsistencyChecker",
    "load_example_pair",
    "DEFAULT_ALIAS_RULES",
    "AliasRule",
    "EventComparator",
    "compare_events",
    "Issue",
    "IssueKind",
    "ComparisonResult",
    "ConsistencyGrade",
    "ConfigurationError",
    "EventConsistencyError",
    "MalformedEventError",
    "format_result",
]
