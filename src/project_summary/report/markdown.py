"""Markdown Renderer - build the status report from a list of issues."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from itertools import chain

from project_summary.report.models import IssueRecord, LabelCategory

ISSUES_SECTION_TITLE = "Open issues"
INTERESTING_MARKER = ":star:"

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_~\[\]|<>])")


def render_report(
    title: str,
    project_url: str,
    issues: Sequence[IssueRecord],
    interesting_labels: Sequence[str],
    uninteresting_labels: Sequence[str],
) -> str:
    """Render the full report.

    Args:
        title: Report title.
        project_url: URL of the source project board.
        issues: Issues to list, in display order.
        interesting_labels: Labels highlighted as noteworthy.
        uninteresting_labels: Labels highlighted as low priority.

    Returns:
        The Markdown document.
    """
    classifier = LabelClassifier(interesting_labels, uninteresting_labels)
    return "\n".join(
        chain(
            generate_summary(title, project_url, issues, classifier),
            generate_issues_section(ISSUES_SECTION_TITLE, issues, classifier),
        )
    )


class LabelClassifier:
    """Case-insensitive lookup of label names against the two categories."""

    def __init__(
        self, interesting_labels: Sequence[str], uninteresting_labels: Sequence[str]
    ) -> None:
        self.interesting = {label.strip().lower() for label in interesting_labels}
        self.uninteresting = {label.strip().lower() for label in uninteresting_labels}

    def classify(self, label: str) -> LabelCategory:
        key = label.strip().lower()
        if key in self.interesting:
            return LabelCategory.INTERESTING
        if key in self.uninteresting:
            return LabelCategory.UNINTERESTING
        return LabelCategory.OTHER

    def has(self, issue: IssueRecord, category: LabelCategory) -> bool:
        return any(self.classify(label) is category for label in issue.labels)


def generate_summary(
    title: str,
    project_url: str,
    issues: Sequence[IssueRecord],
    classifier: LabelClassifier,
) -> Iterator[str]:
    """Yield the title block with counts and a legend."""
    interesting = sum(1 for issue in issues if classifier.has(issue, LabelCategory.INTERESTING))
    uninteresting = sum(
        1 for issue in issues if classifier.has(issue, LabelCategory.UNINTERESTING)
    )

    yield f"# {title}"
    yield ""
    yield f"Source project: [{project_url}]({project_url})"
    yield ""
    yield f"- Open issues: {len(issues)}"
    yield f"- With interesting labels: {interesting}"
    yield f"- With uninteresting labels: {uninteresting}"
    yield ""
    yield (
        f"Legend: **label** {INTERESTING_MARKER} interesting, "
        "~~label~~ uninteresting, `label` other."
    )
    yield ""


def generate_issues_section(
    section_title: str,
    issues: Sequence[IssueRecord],
    classifier: LabelClassifier,
) -> Iterator[str]:
    """Yield a table with one row per issue, in the given order."""
    yield f"## {section_title}"
    yield ""

    if not issues:
        yield "No open issues."
        yield ""
        return

    yield "| Issue | Repository | Assignees | Labels | Updated |"
    yield "| --- | --- | --- | --- | --- |"
    for issue in issues:
        yield _issue_row(issue, classifier)
    yield ""


def _issue_row(issue: IssueRecord, classifier: LabelClassifier) -> str:
    link = f"[{_escape(issue.title)}]({issue.url})"
    assignees = ", ".join(f"@{login}" for login in issue.assignees) or "_unassigned_"
    labels = ", ".join(_format_label(label, classifier) for label in issue.labels) or "-"
    cells = [link, _escape(issue.repository) or "-", assignees, labels, issue.updated_at]
    return "| " + " | ".join(cells) + " |"


def _format_label(label: str, classifier: LabelClassifier) -> str:
    category = classifier.classify(label)
    if category is LabelCategory.INTERESTING:
        return f"**{_escape(label)}** {INTERESTING_MARKER}"
    if category is LabelCategory.UNINTERESTING:
        return f"~~{_escape(label)}~~"
    return _code_span(label)


def _escape(text: str) -> str:
    """Backslash-escape inline Markdown and table delimiters."""
    return _MARKDOWN_SPECIALS.sub(r"\\\1", _single_line(text))


def _code_span(text: str) -> str:
    # Backslashes are literal inside code spans; the fence must outrun any backtick run.
    text = _single_line(text).replace("|", "\\|")
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    fence = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def _single_line(text: str) -> str:
    return text.replace("\r", " ").replace("\n", " ")
