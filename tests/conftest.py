"""Shared pytest fixtures and configuration."""

from typing import Any

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: talks to the real GitHub API (local only)")


def make_issue(
    title: str,
    number: int = 1,
    state: str = "OPEN",
    labels: list[Any] | None = None,
    assignees: list[Any] | None = None,
    repo: str | None = "octo-org/widgets",
) -> dict[str, Any]:
    """Build issue content as returned by the board query."""
    content: dict[str, Any] = {
        "databaseId": 1000 + number,
        "number": number,
        "url": f"https://github.com/octo-org/widgets/issues/{number}",
        "title": title,
        "state": state,
        "createdAt": "2024-01-02T10:00:00Z",
        "updatedAt": "2024-01-05T12:30:00Z",
        "closedAt": None,
        "labels": {"nodes": labels or []},
        "assignees": {"nodes": assignees or []},
    }
    if repo is not None:
        content["repository"] = {"nameWithOwner": repo}
    return content


def make_response(*columns: list[dict[str, Any] | None]) -> dict[str, Any]:
    """Wrap lists of card contents (None for notes) in the board query shape."""
    return {
        "organization": {
            "name": "Octo Org",
            "project": {
                "databaseId": 42,
                "name": "Roadmap",
                "url": "https://github.com/orgs/octo-org/projects/7",
                "columns": {
                    "nodes": [
                        {
                            "databaseId": index,
                            "name": f"Column {index}",
                            "cards": {
                                "edges": [
                                    {"node": {"databaseId": 500 + i, "content": content}}
                                    for i, content in enumerate(cards)
                                ]
                            },
                        }
                        for index, cards in enumerate(columns)
                    ]
                },
            },
        }
    }


@pytest.fixture
def two_column_response() -> dict[str, Any]:
    """Column A: open + closed issue. Column B: note + open issue."""
    return make_response(
        [
            make_issue(
                "Fix bug",
                number=1,
                labels=[{"name": "bug"}],
                assignees=[{"login": "alice"}],
            ),
            make_issue("Old work", number=2, state="CLOSED"),
        ],
        [
            None,
            make_issue("Add feature", number=3, labels=[{"name": "enhancement"}]),
        ],
    )


@pytest.fixture
def issue_factory():
    """Factory for issue content dicts."""
    return make_issue


@pytest.fixture
def response_factory():
    """Factory for board query responses."""
    return make_response
