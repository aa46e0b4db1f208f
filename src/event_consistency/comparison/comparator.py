"""
Event Comparator

Compares two flat event records and reports:
- Declared field-name aliases (e.g. user_id vs userId) and their types
- Type mismatches on fields present in both events under the same name
- Fields present in only one of the two events

The result is graded High / Medium / Low from the issue count. Comparison is
pure: no I/O, no logging, inputs are never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from event_consistency.domain.issue import Issue
from event_consistency.domain.result import ComparisonResult, ConsistencyGrade
from event_consistency.domain.type_category import field_category


@dataclass(frozen=True)
class AliasRule:
    """
    A pair of differently-spelled field names that denote one concept.

    Attributes:
        name_a: Field name as spelled in Event A
        name_b: Field name as spelled in Event B
        concept: Optional concept name used to label type mismatches
    """

    name_a: str
    name_b: str
    concept: Optional[str] = None

    @property
    def label(self) -> str:
        """Label used in the type mismatch message for this pair."""
        if self.concept:
            return f"{self.concept}/{self.name_a}"
        return f"{self.name_a}/{self.name_b}"

    def applies_to(self, event_a: Mapping[str, Any], event_b: Mapping[str, Any]) -> bool:
        return self.name_a in event_a and self.name_b in event_b


DEFAULT_ALIAS_RULES: Tuple[AliasRule, ...] = (
    AliasRule(name_a="user_id", name_b="userId", concept="user"),
)


def grade_for_issue_count(count: int) -> ConsistencyGrade:
    """Grade an issue count: 0 is High, 1-2 is Medium, more is Low."""
    return ConsistencyGrade.from_issue_count(count)


class EventComparator:
    """
    Compares two event records under a fixed list of alias rules.

    Instances hold only an immutable tuple of rules and can be shared freely.
    """

    def __init__(self, alias_rules: Optional[Iterable[AliasRule]] = None):
        """
        Initialize comparator.

        Args:
            alias_rules: Alias rules applied in order before same-name
                comparison. None means DEFAULT_ALIAS_RULES; an empty list
                disables the alias step.
        """
        if alias_rules is None:
            alias_rules = DEFAULT_ALIAS_RULES
        self.alias_rules: Tuple[AliasRule, ...] = tuple(alias_rules)

    def compare(
        self, event_a: Mapping[str, Any], event_b: Mapping[str, Any]
    ) -> ComparisonResult:
        """
        Compare Event A against Event B.

        Issue order: alias issues (rule order), same-name type mismatches
        (A's key order), fields only in A, fields only in B.

        Args:
            event_a: First event record
            event_b: Second event record

        Returns:
            ComparisonResult with issues and consistency grade
        """
        issues: List[Issue] = []

        # Insertion-ordered working sets
        only_a: Dict[str, None] = dict.fromkeys(event_a)
        only_b: Dict[str, None] = dict.fromkeys(event_b)

        for rule in self.alias_rules:
            if not rule.applies_to(event_a, event_b):
                continue

            issues.append(Issue.name_alias(rule.name_a, rule.name_b))
            only_a.pop(rule.name_a, None)
            only_b.pop(rule.name_b, None)

            type_a = field_category(event_a, rule.name_a)
            type_b = field_category(event_b, rule.name_b)
            if type_a is not type_b:
                issues.append(
                    Issue.type_mismatch(
                        rule.name_a, rule.name_b, type_a, type_b, label=rule.label
                    )
                )

        for key in event_a:
            if key not in event_b:
                continue

            only_a.pop(key, None)
            only_b.pop(key, None)

            type_a = field_category(event_a, key)
            type_b = field_category(event_b, key)
            if type_a is not type_b:
                issues.append(Issue.type_mismatch(key, key, type_a, type_b))

        issues.extend(Issue.only_in_a(key) for key in only_a)
        issues.extend(Issue.only_in_b(key) for key in only_b)

        return ComparisonResult.from_issues(issues)


_DEFAULT_COMPARATOR = EventComparator()


def compare_events(
    event_a: Mapping[str, Any],
    event_b: Mapping[str, Any],
    alias_rules: Optional[Iterable[AliasRule]] = None,
) -> ComparisonResult:
    """
    Compare two event records.

    Args:
        event_a: First event record
        event_b: Second event record
        alias_rules: Alias rules to apply (defaults to DEFAULT_ALIAS_RULES)

    Returns:
        ComparisonResult with issues and consistency grade

    Example:
        >>> result = compare_events({"a": 1}, {"a": "1"})
        >>> result.messages
        ['Type mismatch for "a": number vs string']
        >>> result.consistency.value
        'Medium'
    """
    if alias_rules is None:
        return _DEFAULT_COMPARATOR.compare(event_a, event_b)
    return EventComparator(alias_rules).compare(event_a, event_b)
