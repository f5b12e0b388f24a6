"""Response Flattener - turn the nested board response into IssueRecords."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from project_summary.github.exceptions import MalformedResponseError
from project_summary.github.schema import IssueContent, OrgProjectResponse
from project_summary.report.models import IssueRecord


def flatten_issues(raw: dict[str, Any]) -> list[IssueRecord]:
    """Collect the open issues on a board, columns first then cards.

    Note cards, non-issue cards and closed issues are skipped. Board order is
    preserved.

    Raises:
        MalformedResponseError: If the response does not match the query shape.
    """
    response = _validate(raw)

    issues: list[IssueRecord] = []
    for column in response.organization.project.columns.nodes:
        for edge in column.cards.edges:
            content = edge.node.content
            if content is None or content.is_closed:
                continue
            issues.append(_to_record(content))
    return issues


def _validate(raw: dict[str, Any]) -> OrgProjectResponse:
    try:
        return OrgProjectResponse.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise MalformedResponseError(
            f"Unexpected project board response at '{location}': {first['msg']}"
        ) from e


def _to_record(content: IssueContent) -> IssueRecord:
    assignees = content.assignees.nodes or []
    labels = content.labels.nodes or []
    return IssueRecord(
        title=content.title,
        url=content.url,
        repository=_repository_of(content),
        state=content.state,
        created_at=content.created_at,
        updated_at=content.updated_at,
        assignees=tuple(node.login for node in assignees if node is not None),
        labels=tuple(node.name for node in labels if node is not None),
    )


def _repository_of(content: IssueContent) -> str:
    if content.repository is not None:
        return content.repository.name_with_owner
    # https://github.com/<owner>/<repo>/issues/<n>
    parts = content.url.split("/")
    if len(parts) >= 5 and parts[3] and parts[4]:
        return f"{parts[3]}/{parts[4]}"
    return ""
