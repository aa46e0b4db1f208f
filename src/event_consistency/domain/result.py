"""
Comparison result domain model.

Holds the ordered issues of one comparison and the consistency grade derived
from their count.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .issue import Issue, IssueKind

# Highest issue count still graded Medium
MEDIUM_MAX_ISSUES = 2


class ConsistencyGrade(Enum):
    """Coarse consistency classification derived from issue count."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def from_issue_count(cls, count: int) -> "ConsistencyGrade":
        """
        Grade an issue count: 0 is High, 1-2 is Medium, more is Low.

        Args:
            count: Number of issues found

        Returns:
            ConsistencyGrade for the count
        """
        if count <= 0:
            return cls.HIGH
        if count <= MEDIUM_MAX_ISSUES:
            return cls.MEDIUM
        return cls.LOW

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing two event records.

    Attributes:
        issues: Issues in emission order (aliases, type mismatches,
            only-in-A, only-in-B)
        consistency: Grade derived from len(issues)
    """

    issues: Tuple[Issue, ...] = field(default_factory=tuple)
    consistency: ConsistencyGrade = ConsistencyGrade.HIGH

    @classmethod
    def from_issues(cls, issues: List[Issue]) -> "ComparisonResult":
        """Build a result, grading it from the issue count."""
        return cls(
            issues=tuple(issues),
            consistency=ConsistencyGrade.from_issue_count(len(issues)),
        )

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def messages(self) -> List[str]:
        """Display strings of all issues, in order."""
        return [issue.message for issue in self.issues]

    @property
    def is_consistent(self) -> bool:
        return not self.issues

    def issues_of(self, *kinds: IssueKind) -> List[Issue]:
        """Issues whose kind is one of kinds, preserving order."""
        return [issue for issue in self.issues if issue.kind in kinds]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "consistency": self.consistency.value,
            "issue_count": self.issue_count,
            "issues": [issue.to_dict() for issue in self.issues],
        }
