"""State of the reports screen and the report texts it produces."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

_SEVERITIES = ("Critical", "High", "Medium", "Low")

_DETAILED_SECTIONS = {
    "Critical": (
        "🚨 CRITICAL ISSUES (Immediate Action Required):\n",
        "=====================================================\n\n",
    ),
    "High": ("⚠️  HIGH PRIORITY ISSUES:\n", "=========================\n\n"),
    "Medium": ("🔶 MEDIUM PRIORITY ISSUES:\n", "==========================\n\n"),
    "Low": ("ℹ️  LOW PRIORITY ISSUES:\n", "========================\n\n"),
}

_MARKDOWN_ICONS = {"Critical": "🚨", "High": "⚠️", "Medium": "🔶", "Low": "ℹ️"}


class ViewMode(enum.Enum):
    SELECTION = "selection"
    REPORT = "report"


class ReportFormat(enum.Enum):
    SUMMARY = "summary"
    DETAILED = "detailed"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class ExportStatus:
    """Where an export stands: ``none``, ``exporting`` a format, or ``success`` at a path."""

    phase: str = "none"
    detail: str = ""

    @property
    def is_exporting(self) -> bool:
        return self.phase == "exporting"

    @property
    def is_success(self) -> bool:
        return self.phase == "success"


def _status_name(status: Any) -> Any:
    if isinstance(status, enum.Enum):
        return status.value if isinstance(status.value, str) else status.name
    return status if status is None or isinstance(status, str) else str(status)


def _issue_to_dict(issue: Any) -> dict[str, Any]:
    return {
        "file": issue.file,
        "line": issue.line,
        "severity": issue.severity,
        "category": issue.category,
        "description": issue.description,
        "commit_status": _status_name(issue.commit_status),
    }


def _review_to_dict(review: Any) -> dict[str, Any]:
    return {
        "files_count": review.files_count,
        "issues_count": review.issues_count,
        "critical_issues": review.critical_issues,
        "high_issues": review.high_issues,
        "medium_issues": review.medium_issues,
        "low_issues": review.low_issues,
        "issues": [_issue_to_dict(issue) for issue in review.issues],
    }


def _issue_entry(number: int, issue: Any) -> str:
    return (
        f"{number}. File: {issue.file}\n"
        f"   Line: {issue.line}\n"
        f"   Category: {issue.category}\n"
        f"   Issue: {issue.description}\n\n"
    )


def _summary_report(review: Any) -> str:
    critical_mark = "⚠️" if review.critical_issues > 0 else "✅"
    medium_mark = "📝" if review.medium_issues > 0 else "✅"
    low_mark = "💡" if review.low_issues > 0 else "✅"
    return (
        "🤖 AI Code Review Summary\n"
        "========================\n\n"
        "📊 Analysis Results:\n"
        f"• Files analyzed: {review.files_count}\n"
        f"• Total issues found: {review.issues_count}\n\n"
        "🚨 Issue Breakdown:\n"
        f"• Critical: {review.critical_issues} issues\n"
        f"• High: {review.high_issues} issues\n"
        f"• Medium: {review.medium_issues} issues\n"
        f"• Low: {review.low_issues} issues\n\n"
        "📋 Recommendations:\n"
        f"{critical_mark} Focus on addressing Critical and High severity issues first.\n"
        f"{medium_mark} Review Medium issues for code quality improvements.\n"
        f"{low_mark} Low severity issues can be addressed as time permits.\n\n"
        "🎯 Next Steps:\n"
        "1. Review each Critical issue immediately\n"
        "2. Plan fixes for High severity issues\n"
        "3. Consider Medium issues for future iterations\n"
        "4. Use the detailed report for specific guidance"
    )


def _detailed_report(review: Any) -> str:
    parts = [
        "🤖 AI Code Review - Detailed Report\n"
        "===================================\n\n"
        "📊 Overview:\n"
        "• Repository analyzed\n"
        f"• Files processed: {review.files_count}\n"
        f"• Total issues: {review.issues_count}\n\n"
    ]
    if not review.issues:
        parts.append("🎉 No issues found! Your code looks great!\n")
        return "".join(parts)

    groups: dict[str, list[Any]] = {severity: [] for severity in _SEVERITIES}
    for issue in review.issues:
        key = issue.severity if issue.severity in groups else "Low"
        groups[key].append(issue)

    for severity, issues in groups.items():
        if not issues:
            continue
        title, underline = _DETAILED_SECTIONS[severity]
        parts.append(title)
        parts.append(underline)
        parts.extend(_issue_entry(n, issue) for n, issue in enumerate(issues, 1))

    parts.append("\n📝 End of Report\n")
    return "".join(parts)


def _json_report(review: Any) -> str:
    try:
        return json.dumps(_review_to_dict(review), indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return "Error generating JSON report"


def _markdown_report(review: Any) -> str:
    parts = [
        "# 🤖 AI Code Review Report\n\n"
        "## 📊 Summary\n\n"
        f"- **Files analyzed:** {review.files_count}\n"
        f"- **Total issues:** {review.issues_count}\n"
        f"- **Critical issues:** {review.critical_issues}\n"
        f"- **High priority:** {review.high_issues}\n"
        f"- **Medium priority:** {review.medium_issues}\n"
        f"- **Low priority:** {review.low_issues}\n\n"
    ]
    if not review.issues:
        parts.append("## 🎉 Results\n\nNo issues found! Your code looks great!\n")
        return "".join(parts)

    parts.append("## 📋 Issues by Severity\n\n")
    for severity in _SEVERITIES:
        matching = [issue for issue in review.issues if issue.severity == severity]
        if not matching:
            continue
        parts.append(f"### {_MARKDOWN_ICONS[severity]} {severity} Priority Issues\n\n")
        parts.extend(
            f"- **File:** `{issue.file}`\n"
            f"  **Line:** {issue.line}\n"
            f"  **Category:** {issue.category}\n"
            f"  **Issue:** {issue.description}\n\n"
            for issue in matching
        )

    parts.append("---\n\n*Report generated by AI Code Buddy*\n")
    return "".join(parts)


_GENERATORS = {
    ReportFormat.SUMMARY: _summary_report,
    ReportFormat.DETAILED: _detailed_report,
    ReportFormat.JSON: _json_report,
    ReportFormat.MARKDOWN: _markdown_report,
}


@dataclass
class ReportsWidgetState:
    """Selected report format, export progress and the last generated report."""

    review: Any = None
    selected_format: ReportFormat = ReportFormat.SUMMARY
    export_status: ExportStatus = ExportStatus()
    generated_report: str | None = None
    view_mode: ViewMode = ViewMode.SELECTION

    def set_review(self, review: Any) -> None:
        self.review = review

    def next_format(self) -> None:
        order = list(ReportFormat)
        self.selected_format = order[(order.index(self.selected_format) + 1) % len(order)]

    def previous_format(self) -> None:
        order = list(ReportFormat)
        self.selected_format = order[(order.index(self.selected_format) - 1) % len(order)]

    def start_export(self, format: str) -> None:
        self.export_status = ExportStatus("exporting", format)

    def complete_export(self, path: str) -> None:
        self.export_status = ExportStatus("success", path)

    def generate_report(self) -> str | None:
        """Render the review in the selected format and switch to report view.

        Returns None, changing nothing, when there is no review.
        """
        if self.review is None:
            return None
        content = _GENERATORS[self.selected_format](self.review)
        self.generated_report = content
        self.view_mode = ViewMode.REPORT
        return content

    def back_to_selection(self) -> None:
        self.view_mode = ViewMode.SELECTION