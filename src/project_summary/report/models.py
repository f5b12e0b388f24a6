"""Data models for report generation."""

from dataclasses import dataclass, field
from enum import StrEnum


class LabelCategory(StrEnum):
    """How a label is highlighted in the report."""

    INTERESTING = "interesting"
    UNINTERESTING = "uninteresting"
    OTHER = "other"


@dataclass(frozen=True)
class IssueRecord:
    """An open issue pulled from a project board.

    Attributes:
        title: Issue title.
        url: Canonical issue URL.
        repository: Repository name with owner ("owner/repo").
        state: Issue state as reported by GitHub.
        created_at: ISO-8601 creation timestamp.
        updated_at: ISO-8601 last update timestamp.
        assignees: Assignee logins, in board order.
        labels: Label names, in board order.
    """

    title: str
    url: str
    repository: str
    state: str
    created_at: str
    updated_at: str
    assignees: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)
