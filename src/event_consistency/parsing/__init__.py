"""Parsing module - raw JSON text to event records."""

from .event_parser import ParseOutcome, parse_event_pair, safe_parse

__all__ = ["ParseOutcome", "parse_event_pair", "safe_parse"]
