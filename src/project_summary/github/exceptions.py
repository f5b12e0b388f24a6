"""Custom exceptions for GitHub access."""

from __future__ import annotations

from typing import Any

from project_summary.exceptions import ProjectSummaryError


class GitHubError(ProjectSummaryError):
    """Base exception for GitHub access errors."""


class GraphQLError(GitHubError):
    """GraphQL request failed at the transport or API level."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class MalformedResponseError(GitHubError):
    """GraphQL response does not have the expected shape."""


class UnsupportedProjectError(GitHubError):
    """Project board type is not supported (repository-level boards)."""
