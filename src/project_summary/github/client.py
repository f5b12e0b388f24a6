"""GitHubGraphQLClient - Executes GraphQL queries against the GitHub API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from project_summary.github.exceptions import GraphQLError

logger = logging.getLogger("project_summary.github")

DEFAULT_API_URL = "https://api.github.com/graphql"
DEFAULT_TIMEOUT = 30.0


class GitHubGraphQLClient:
    """Thin authenticated client for the GitHub GraphQL endpoint."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub token with read access to the organization's projects
            base_url: GitHub GraphQL API URL (for testing/enterprise)
            timeout: Request timeout in seconds
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GitHubGraphQLClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The "data" member of the response

        Raises:
            GraphQLError: If the request fails or the API reports errors
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        logger.debug("POST %s (variables=%s)", self.base_url, variables)
        try:
            response = self.client.post(self.base_url, json=payload)
        except httpx.HTTPError as e:
            raise GraphQLError(f"GraphQL request failed: {e}") from e

        if response.status_code != 200:
            raise GraphQLError(
                f"GraphQL request failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GraphQLError(f"GraphQL response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise GraphQLError(f"GraphQL response is not a JSON object: {response.text}")

        if data.get("errors"):
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in data["errors"]
            )
            raise GraphQLError(f"GraphQL errors: {messages}", errors=data["errors"])

        if not isinstance(data.get("data"), dict):
            raise GraphQLError("GraphQL response contained no data")

        return dict(data["data"])
