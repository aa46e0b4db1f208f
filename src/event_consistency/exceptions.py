"""
Custom exception hierarchy for the event consistency checker.

The comparator itself is total and never raises; these exceptions belong to
the boundaries around it (parsing raw text and loading configuration).
"""

from typing import Dict


class EventConsistencyError(Exception):
    """
    Base exception for all event consistency checker errors.
    """

    pass


class MalformedEventError(EventConsistencyError):
    """
    Raised when one or both event texts cannot be used as event records.

    Covers invalid JSON as well as valid JSON whose top-level value is not an
    object. The comparison never runs when this is raised.

    Attributes:
        errors: Mapping of side ("A" or "B") to the diagnostic message.
            Only failing sides are present.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        lines = ["Error parsing JSON:"]
        for side in sorted(self.errors):
            lines.append(f"- Event {side}: {self.errors[side]}")
        super().__init__("\n".join(lines))

    @property
    def sides(self) -> list:
        """Sides that failed to parse, in A, B order."""
        return sorted(self.errors)


class ConfigurationError(EventConsistencyError):
    """
    Raised when alias configuration cannot be loaded or fails validation.
    """

    pass
