"""Domain models - event comparison entities."""

from .issue import Issue, IssueKind
from .result import ComparisonResult, ConsistencyGrade
from .type_category import MISSING, TypeCategory, categorize, field_category

__all__ = [
    "Issue",
    "IssueKind",
    "ComparisonResult",
    "ConsistencyGrade",
    "MISSING",
    "TypeCategory",
    "categorize",
    "field_category",
]
