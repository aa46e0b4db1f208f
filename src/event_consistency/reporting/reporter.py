"""Result Reporter - Render comparison results as text, JSON or Markdown."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping

from event_consistency.domain.result import ComparisonResult
from event_consistency.reporting.formatter import format_result
from event_consistency.reporting.summary import build_summary

logger = logging.getLogger(__name__)

TOOL_NAME = "event-consistency"
REPORT_FORMATS = ("text", "json", "markdown")


class ResultReporter:
    """Generate comparison artifacts (plain text, JSON, Markdown)."""

    def __init__(self, event_a_name: str = "Event A", event_b_name: str = "Event B") -> None:
        self.event_a_name = event_a_name
        self.event_b_name = event_b_name

    def generate_json_report(
        self,
        result: ComparisonResult,
        event_a: Mapping[str, Any] | None = None,
        event_b: Mapping[str, Any] | None = None,
    ) -> str:
        report: Dict[str, Any] = {
            "metadata": {
                "tool": TOOL_NAME,
                "event_a": self.event_a_name,
                "event_b": self.event_b_name,
                "generated_at": datetime.now().isoformat(),
            },
            **result.to_dict(),
            "summary": build_summary(result).to_dict(),
        }

        if event_a is not None:
            report["event_a_payload"] = dict(event_a)
        if event_b is not None:
            report["event_b_payload"] = dict(event_b)

        return json.dumps(report, indent=2, ensure_ascii=False, default=str)

    def generate_markdown_summary(self, result: ComparisonResult) -> str:
        summary = build_summary(result)

        md_lines = [
            "# Event Consistency Report",
            f"**Event A:** {self.event_a_name}",
            f"**Event B:** {self.event_b_name}",
            f"**Generated:** {datetime.now().isoformat()}",
            "",
            "## Summary",
            f"- **Consistency:** {result.consistency.value}",
            f"- **Issues:** {result.issue_count}",
            "",
            "## Naming & Field Coverage",
        ]
        md_lines.extend(f"- {line}" for line in summary.naming_lines)
        md_lines.extend(["", "## Type Alignment"])
        md_lines.extend(f"- {line}" for line in summary.type_lines)
        md_lines.extend(["", "## Overall"])
        md_lines.extend(summary.overall_lines)

        if result.issues:
            md_lines.extend(["", "## Detailed Issues", ""])
            for issue in result.issues:
                md_lines.append(f"- **{issue.kind.value.upper()}** {issue.message}")

        return "\n".join(md_lines)

    def render(
        self,
        result: ComparisonResult,
        fmt: str = "text",
        event_a: Mapping[str, Any] | None = None,
        event_b: Mapping[str, Any] | None = None,
    ) -> str:
        if fmt == "text":
            return format_result(result)
        if fmt == "json":
            return self.generate_json_report(result, event_a, event_b)
        if fmt == "markdown":
            return self.generate_markdown_summary(result)
        raise ValueError(f"Unknown report format: {fmt!r}. Expected one of {REPORT_FORMATS}")

    def write_report(
        self,
        path: Path,
        result: ComparisonResult,
        fmt: str = "text",
        event_a: Mapping[str, Any] | None = None,
        event_b: Mapping[str, Any] | None = None,
    ) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(result, fmt, event_a, event_b) + "\n", encoding="utf-8")
        logger.info("Wrote %s comparison report: %s", fmt, path)
        return path
