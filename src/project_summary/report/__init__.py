"""Report generation - flatten board data and render Markdown."""

from project_summary.report.flattener import flatten_issues
from project_summary.report.markdown import (
    ISSUES_SECTION_TITLE,
    LabelClassifier,
    generate_issues_section,
    generate_summary,
    render_report,
)
from project_summary.report.models import IssueRecord, LabelCategory

__all__ = [
    "ISSUES_SECTION_TITLE",
    "IssueRecord",
    "LabelCategory",
    "LabelClassifier",
    "flatten_issues",
    "generate_issues_section",
    "generate_summary",
    "render_report",
]
