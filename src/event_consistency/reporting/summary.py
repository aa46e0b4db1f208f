"""
Categorized summary of a comparison result.

Breaks the issues down the way a reviewer reads them: a one-line badge,
naming and field coverage, type alignment, and an overall verdict.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List

from event_consistency.domain.issue import IssueKind
from event_consistency.domain.result import ComparisonResult, ConsistencyGrade

GRADE_EXPLANATIONS: Dict[ConsistencyGrade, str] = {
    ConsistencyGrade.HIGH: "Minor differences detected, but events are still mostly aligned.",
    ConsistencyGrade.MEDIUM: (
        "Several differences detected; integration or analytics may behave differently."
    ),
    ConsistencyGrade.LOW: (
        "Substantial differences detected; these events likely do not represent "
        "a stable shared contract."
    ),
}


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("" if count == 1 else "s")


@dataclass
class ResultSummary:
    """Human-readable breakdown of one comparison."""

    badge: str
    naming_lines: List[str] = field(default_factory=list)
    type_lines: List[str] = field(default_factory=list)
    overall_lines: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def build_summary(result: ComparisonResult) -> ResultSummary:
    """
    Build the categorized summary for a comparison result.

    Args:
        result: Comparison result to summarize

    Returns:
        ResultSummary with badge, naming, type and overall sections
    """
    naming = result.issues_of(IssueKind.NAME_ALIAS)
    presence = result.issues_of(IssueKind.ONLY_IN_A, IssueKind.ONLY_IN_B)
    types = result.issues_of(IssueKind.TYPE_MISMATCH)

    if result.is_consistent:
        badge = "Events are highly consistent. No issues detected."
    else:
        badge = f"Consistency: {result.consistency.value} · Issues: {result.issue_count}"

    if not naming and not presence:
        naming_lines = ["No naming or field-presence mismatches detected."]
    else:
        naming_lines = []
        if naming:
            naming_lines.append(f"Naming differences: {_pluralize(len(naming), 'issue')}")
        if presence:
            naming_lines.append(
                f"Fields only in one event: {_pluralize(len(presence), 'issue')}"
            )

    if not types:
        type_lines = ["No type mismatches detected."]
    else:
        type_lines = ["Type mismatches:"] + [issue.message for issue in types]

    if result.is_consistent:
        overall_lines = [
            "Overall consistency: High. Events appear to describe the same concept."
        ]
    else:
        overall_lines = [
            f"Overall consistency: {result.consistency.value}.",
            GRADE_EXPLANATIONS[result.consistency],
        ]

    return ResultSummary(
        badge=badge,
        naming_lines=naming_lines,
        type_lines=type_lines,
        overall_lines=overall_lines,
    )
