"""GitHub GraphQL access for project boards."""

from project_summary.github.client import GitHubGraphQLClient
from project_summary.github.exceptions import (
    GitHubError,
    GraphQLError,
    MalformedResponseError,
    UnsupportedProjectError,
)
from project_summary.github.queries import (
    DEFAULT_NUM_ASSIGNEES,
    DEFAULT_NUM_COLUMNS,
    ORG_PROJECT_ISSUES_QUERY,
    fetch_open_issues,
)

__all__ = [
    "DEFAULT_NUM_ASSIGNEES",
    "DEFAULT_NUM_COLUMNS",
    "GitHubError",
    "GitHubGraphQLClient",
    "GraphQLError",
    "MalformedResponseError",
    "ORG_PROJECT_ISSUES_QUERY",
    "UnsupportedProjectError",
    "fetch_open_issues",
]
