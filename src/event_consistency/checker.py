"""
Consistency Checker - host service around the event comparator.

Wires settings, parsing, comparison and logging together for callers that
start from raw JSON text (the CLI) or already-parsed records.
"""

from typing import Any, Mapping, Optional, Tuple

from event_consistency.comparison.comparator import EventComparator
from event_consistency.config.settings import Settings
from event_consistency.domain.result import ComparisonResult
from event_consistency.parsing.event_parser import parse_event_pair
from event_consistency.utils.logger import get_logger, log_operation, summarize_event

logger = get_logger(__name__)

# Sample pair: same login event from two client versions
EXAMPLE_EVENT_A = """{
  "user_id": 123,
  "action": "login",
  "timestamp": "2025-11-22T15:00:00Z"
}"""

EXAMPLE_EVENT_B = """{
  "userId": "123",
  "type": "LOGIN",
  "timestamp": "2025-11-22T15:00:00Z"
}"""


def load_example_pair() -> Tuple[str, str]:
    """Return the bundled sample event texts (Event A, Event B)."""
    return EXAMPLE_EVENT_A, EXAMPLE_EVENT_B


class ConsistencyChecker:
    """
    Compare event pairs using configured alias rules.

    Raises MalformedEventError from check_texts when either side cannot be
    parsed; the comparison is skipped entirely in that case.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize checker.

        Args:
            settings: Settings instance (defaults to Settings())
        """
        self.settings = settings if settings is not None else Settings()
        self.comparator = EventComparator(self.settings.alias_rules)

    @log_operation("check_events")
    def check(
        self, event_a: Mapping[str, Any], event_b: Mapping[str, Any]
    ) -> ComparisonResult:
        """
        Compare two parsed event records.

        Args:
            event_a: First event record
            event_b: Second event record

        Returns:
            ComparisonResult with issues and consistency grade
        """
        result = self.comparator.compare(event_a, event_b)
        logger.info(
            "Comparison complete",
            operation="check_events",
            context={
                "consistency": result.consistency.value,
                "issue_count": result.issue_count,
                "issue_kinds": [issue.kind.value for issue in result.issues],
                "event_a": summarize_event(event_a),
                "event_b": summarize_event(event_b),
                "alias_rule_count": len(self.comparator.alias_rules),
            },
        )
        return result

    @log_operation("check_texts")
    def check_texts(
        self, text_a: Optional[str], text_b: Optional[str]
    ) -> Tuple[ComparisonResult, Mapping[str, Any], Mapping[str, Any]]:
        """
        Parse two JSON texts and compare the resulting records.

        Args:
            text_a: Raw JSON text of Event A
            text_b: Raw JSON text of Event B

        Returns:
            Tuple of (result, event_a, event_b)

        Raises:
            MalformedEventError: If either text is not a JSON object
        """
        event_a, event_b = parse_event_pair(text_a, text_b)
        return self.check(event_a, event_b), event_a, event_b
