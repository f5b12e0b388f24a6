"""Unit tests for GitHubGraphQLClient."""

from unittest.mock import MagicMock

import httpx
import pytest

from project_summary.github import GitHubGraphQLClient, GraphQLError


@pytest.fixture
def mock_http() -> MagicMock:
    """Create a mock HTTP client."""
    return MagicMock()


@pytest.fixture
def client(mock_http: MagicMock) -> GitHubGraphQLClient:
    """Create a client with the HTTP layer mocked."""
    client = GitHubGraphQLClient(token="test-token")
    client._client = mock_http
    return client


def _mock_response(payload: dict, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = str(payload)
    return response


@pytest.mark.unit
class TestExecute:
    """Tests for execute."""

    def test_returns_data(self, client: GitHubGraphQLClient, mock_http: MagicMock) -> None:
        """Returns the data member of the response."""
        mock_http.post.return_value = _mock_response({"data": {"viewer": {"login": "me"}}})

        data = client.execute("query { viewer { login } }", {"a": 1})

        assert data == {"viewer": {"login": "me"}}
        mock_http.post.assert_called_once_with(
            "https://api.github.com/graphql",
            json={"query": "query { viewer { login } }", "variables": {"a": 1}},
        )

    def test_omits_empty_variables(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        mock_http.post.return_value = _mock_response({"data": {}})

        client.execute("query { viewer { login } }")

        assert mock_http.post.call_args.kwargs["json"] == {"query": "query { viewer { login } }"}

    def test_http_error_status_raises(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        """Non-200 responses raise GraphQLError with the status code."""
        mock_http.post.return_value = _mock_response({"message": "Bad credentials"}, 401)

        with pytest.raises(GraphQLError) as exc_info:
            client.execute("query { viewer { login } }")

        assert exc_info.value.status_code == 401
        assert "401" in str(exc_info.value)

    def test_graphql_errors_raise(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        """An errors array raises GraphQLError carrying the messages."""
        errors = [{"message": "Could not resolve to an Organization with the login of 'nope'."}]
        mock_http.post.return_value = _mock_response(
            {"data": {"organization": None}, "errors": errors}
        )

        with pytest.raises(GraphQLError) as exc_info:
            client.execute("query { x }")

        assert "Could not resolve" in str(exc_info.value)
        assert exc_info.value.errors == errors

    def test_transport_error_is_wrapped(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        mock_http.post.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(GraphQLError, match="connection refused"):
            client.execute("query { x }")

    def test_non_object_json_raises(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        """A JSON array body is reported as a GraphQLError."""
        response = _mock_response({})
        response.json.return_value = []
        mock_http.post.return_value = response

        with pytest.raises(GraphQLError, match="not a JSON object"):
            client.execute("query { x }")

    def test_non_dict_errors_are_reported(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        mock_http.post.return_value = _mock_response({"errors": ["rate limited"]})

        with pytest.raises(GraphQLError, match="rate limited"):
            client.execute("query { x }")

    def test_missing_data_raises(
        self, client: GitHubGraphQLClient, mock_http: MagicMock
    ) -> None:
        mock_http.post.return_value = _mock_response({})

        with pytest.raises(GraphQLError, match="no data"):
            client.execute("query { x }")


@pytest.mark.unit
class TestClientLifecycle:
    """Tests for client creation and close."""

    def test_client_sends_bearer_token(self) -> None:
        client = GitHubGraphQLClient(token="abc123")

        try:
            assert client.client.headers["Authorization"] == "Bearer abc123"
        finally:
            client.close()

    def test_close_releases_client(self, client: GitHubGraphQLClient, mock_http: MagicMock) -> None:
        client.close()

        mock_http.close.assert_called_once()
        assert client._client is None

    def test_context_manager_closes(self, mock_http: MagicMock) -> None:
        with GitHubGraphQLClient(token="t") as client:
            client._client = mock_http

        mock_http.close.assert_called_once()
