"""
Reference plain-text rendering of comparison results and parse errors.
"""

from typing import List, Mapping

from event_consistency.domain.result import ComparisonResult

NO_ISSUES_LINE = "No inconsistencies detected."
ISSUES_HEADER = "Inconsistencies Detected:"
PARSE_ERROR_HEADER = "Error parsing JSON:"


def format_result(result: ComparisonResult) -> str:
    """
    Render a comparison result as the reference plain-text report.

    Example:
        Inconsistencies Detected:
        - Type mismatch for "a": number vs string

        Consistency: Medium
        Issues: 1
    """
    lines: List[str] = []

    if result.is_consistent:
        lines.append(NO_ISSUES_LINE)
    else:
        lines.append(ISSUES_HEADER)
        for issue in result.issues:
            lines.append(f"- {issue.message}")

    lines.append("")
    lines.append(f"Consistency: {result.consistency.value}")
    lines.append(f"Issues: {result.issue_count}")

    return "\n".join(lines)


def format_parse_errors(errors: Mapping[str, str]) -> str:
    """Render per-side parse diagnostics, Event A first."""
    lines = [PARSE_ERROR_HEADER]
    for side in sorted(errors):
        lines.append(f"- Event {side}: {errors[side]}")
    return "\n".join(lines)
