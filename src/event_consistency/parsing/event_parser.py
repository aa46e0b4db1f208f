"""
Event text parsing boundary.

Turns raw JSON text into event records, or into diagnostics that identify the
offending side. The comparator only ever sees successfully parsed objects.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from event_consistency.domain.type_category import TypeCategory, categorize
from event_consistency.exceptions import MalformedEventError


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one event text."""

    ok: bool
    value: Any = None
    error: Optional[str] = None


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Invalid JSON token: {token}")


def safe_parse(text: Optional[str]) -> ParseOutcome:
    """
    Parse JSON text without raising.

    Args:
        text: Raw JSON text; None is treated as empty text

    Returns:
        ParseOutcome with the parsed value, or the decoder message on failure
    """
    try:
        value = json.loads(text or "", parse_constant=_reject_constant)
    except ValueError as e:
        return ParseOutcome(ok=False, error=str(e))
    except RecursionError:
        return ParseOutcome(ok=False, error="JSON nesting too deep")
    return ParseOutcome(ok=True, value=value)


def _parse_event(text: Optional[str]) -> ParseOutcome:
    outcome = safe_parse(text)
    if not outcome.ok:
        return outcome

    category = categorize(outcome.value)
    if category is not TypeCategory.OBJECT:
        return ParseOutcome(
            ok=False, error=f"expected a JSON object, got {category.value}"
        )
    return outcome


def parse_event_pair(
    text_a: Optional[str], text_b: Optional[str]
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Parse both event texts into records.

    Args:
        text_a: Raw JSON text of Event A
        text_b: Raw JSON text of Event B

    Returns:
        Tuple of (event_a, event_b)

    Raises:
        MalformedEventError: If either side is not valid JSON or not an object
    """
    parsed_a = _parse_event(text_a)
    parsed_b = _parse_event(text_b)

    errors: Dict[str, str] = {}
    if not parsed_a.ok:
        errors["A"] = parsed_a.error or "invalid JSON"
    if not parsed_b.ok:
        errors["B"] = parsed_b.error or "invalid JSON"
    if errors:
        raise MalformedEventError(errors)

    return parsed_a.value, parsed_b.value
