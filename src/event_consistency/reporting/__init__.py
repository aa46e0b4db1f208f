"""Reporting module - text, JSON and Markdown rendering of results."""

from .formatter import format_parse_errors, format_result
from .reporter import REPORT_FORMATS, ResultReporter
from .summary import ResultSummary, build_summary

__all__ = [
    "format_parse_errors",
    "format_result",
    "REPORT_FORMATS",
    "ResultReporter",
    "ResultSummary",
    "build_summary",
]
