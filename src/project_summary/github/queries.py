"""Project Query Executor - fetch the open issues on an organization board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from project_summary.github.exceptions import UnsupportedProjectError

if TYPE_CHECKING:
    from project_summary.github.client import GitHubGraphQLClient
    from project_summary.project import ProjectReference

# Results beyond these limits are silently truncated; there is no pagination.
DEFAULT_NUM_COLUMNS = 10
DEFAULT_NUM_ASSIGNEES = 5

# https://docs.github.com/graphql/overview/explorer is good to play around with
ORG_PROJECT_ISSUES_QUERY = """
query ($login: String!, $project: Int!, $numColumns: Int!, $numAssignees: Int!) {
    organization(login: $login) {
        name
        project(number: $project) {
            databaseId
            name
            url
            columns(first: $numColumns) {
                nodes {
                    databaseId
                    name
                    cards {
                        edges {
                            node {
                                databaseId
                                content {
                                    ... on Issue {
                                        databaseId
                                        number
                                        url
                                        title
                                        state
                                        createdAt
                                        updatedAt
                                        closedAt
                                        repository {
                                            nameWithOwner
                                        }
                                        labels(first: 10) {
                                            nodes {
                                                name
                                            }
                                        }
                                        assignees(first: $numAssignees) {
                                            nodes {
                                                login
                                            }
                                        }
                                    }
                                }
                            }
                        }
                    }
                }
            }
        }
    }
}
"""


def fetch_open_issues(
    ref: ProjectReference,
    client: GitHubGraphQLClient,
    num_columns: int = DEFAULT_NUM_COLUMNS,
    num_assignees: int = DEFAULT_NUM_ASSIGNEES,
) -> dict[str, Any]:
    """Query every card on an organization project board.

    Args:
        ref: Organization project reference
        client: GraphQL client used to run the query
        num_columns: Maximum number of columns to fetch
        num_assignees: Maximum number of assignees to fetch per issue

    Returns:
        Raw GraphQL data, rooted at "organization"

    Raises:
        UnsupportedProjectError: If the reference is a repository-level board
        GraphQLError: If the query fails
    """
    if not ref.is_organization:
        raise UnsupportedProjectError(
            f"Repository-level projects are not supported yet ({ref.owner} #{ref.number})"
        )

    return client.execute(
        ORG_PROJECT_ISSUES_QUERY,
        {
            "login": ref.owner,
            "project": ref.number,
            "numColumns": num_columns,
            "numAssignees": num_assignees,
        },
    )
