"""
Issue domain model.

An issue is one discrepancy between two event records. Issues are tagged by
kind and carry structured fields; the human-readable wording is generated
from those fields only when a message is requested.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .type_category import TypeCategory


class IssueKind(Enum):
    """Discrepancy kinds reported by the comparator."""

    NAME_ALIAS = "name_alias"
    TYPE_MISMATCH = "type_mismatch"
    ONLY_IN_A = "only_in_a"
    ONLY_IN_B = "only_in_b"


@dataclass(frozen=True)
class Issue:
    """
    Immutable discrepancy between Event A and Event B.

    Attributes:
        kind: Issue kind
        field_a: Field name on the Event A side (None for ONLY_IN_B)
        field_b: Field name on the Event B side (None for ONLY_IN_A)
        type_a: Type category observed in Event A (TYPE_MISMATCH only)
        type_b: Type category observed in Event B (TYPE_MISMATCH only)
        label: Display label for a type mismatch on an aliased pair,
            e.g. "user/user_id". None for same-name fields.
    """

    kind: IssueKind
    field_a: Optional[str] = None
    field_b: Optional[str] = None
    type_a: Optional[TypeCategory] = None
    type_b: Optional[TypeCategory] = None
    label: Optional[str] = None

    @classmethod
    def name_alias(cls, field_a: str, field_b: str) -> "Issue":
        return cls(IssueKind.NAME_ALIAS, field_a=field_a, field_b=field_b)

    @classmethod
    def type_mismatch(
        cls,
        field_a: str,
        field_b: str,
        type_a: TypeCategory,
        type_b: TypeCategory,
        label: Optional[str] = None,
    ) -> "Issue":
        return cls(
            IssueKind.TYPE_MISMATCH,
            field_a=field_a,
            field_b=field_b,
            type_a=type_a,
            type_b=type_b,
            label=label,
        )

    @classmethod
    def only_in_a(cls, field: str) -> "Issue":
        return cls(IssueKind.ONLY_IN_A, field_a=field)

    @classmethod
    def only_in_b(cls, field: str) -> "Issue":
        return cls(IssueKind.ONLY_IN_B, field_b=field)

    @property
    def message(self) -> str:
        """Legacy display wording for this issue."""
        if self.kind is IssueKind.NAME_ALIAS:
            return f"Field name mismatch: {self.field_a} (Event A) vs {self.field_b} (Event B)"
        if self.kind is IssueKind.TYPE_MISMATCH:
            subject = self.label if self.label is not None else f'"{self.field_a}"'
            return f"Type mismatch for {subject}: {self.type_a} vs {self.type_b}"
        if self.kind is IssueKind.ONLY_IN_A:
            return f"Field only in Event A: {self.field_a}"
        return f"Field only in Event B: {self.field_b}"

    @property
    def is_naming(self) -> bool:
        return self.kind is IssueKind.NAME_ALIAS

    @property
    def is_field_presence(self) -> bool:
        return self.kind in (IssueKind.ONLY_IN_A, IssueKind.ONLY_IN_B)

    @property
    def is_type_mismatch(self) -> bool:
        return self.kind is IssueKind.TYPE_MISMATCH

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "field_a": self.field_a,
            "field_b": self.field_b,
            "type_a": self.type_a.value if self.type_a else None,
            "type_b": self.type_b.value if self.type_b else None,
            "label": self.label,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message
