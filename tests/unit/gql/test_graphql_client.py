"""Tests for the GraphQL client."""

import json

import pytest

from massdriver.errors.exceptions import GraphQLError, RequestFailedError
from massdriver.gql import GraphQLClient
from massdriver.testing import MOCK_URL


@pytest.mark.unit
def test_endpoint(client):
    assert client.gql.endpoint == f"{MOCK_URL}/api"


@pytest.mark.unit
def test_execute_posts_query(client, mock_api):
    """Queries are POSTed as JSON to /api with auth headers."""
    mock_api.register("POST", "/api", json={"data": {"viewer": {"email": "me@example.com"}}})

    data = client.gql.execute(
        "query Viewer($id: ID!) { viewer { email } }",
        variables={"id": "1"},
        operation_name="Viewer",
    )

    assert data == {"viewer": {"email": "me@example.com"}}
    request = mock_api.last_request
    assert request.method == "POST"
    assert request.url.path == "/api"
    assert request.headers["Authorization"].startswith("Basic ")
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "query": "query Viewer($id: ID!) { viewer { email } }",
        "variables": {"id": "1"},
        "operationName": "Viewer",
    }


@pytest.mark.unit
def test_execute_omits_empty_optional_fields(client, mock_api):
    mock_api.register("POST", "/api", json={"data": {}})

    client.gql.execute("{ ping }")

    assert json.loads(mock_api.last_request.content) == {"query": "{ ping }"}


@pytest.mark.unit
def test_execute_raises_on_graphql_errors(client, mock_api):
    mock_api.register("POST", "/api", json={"data": None, "errors": [{"message": "not authorized"}]})

    with pytest.raises(GraphQLError) as exc_info:
        client.gql.execute("{ secret }")

    assert exc_info.value.errors == [{"message": "not authorized"}]
    assert "not authorized" in str(exc_info.value)


@pytest.mark.unit
def test_execute_raises_on_http_error(client, mock_api):
    mock_api.register("POST", "/api", status_code=500, json={"error": "boom"})

    with pytest.raises(RequestFailedError):
        client.gql.execute("{ ping }")


@pytest.mark.unit
def test_custom_path(client, mock_api):
    mock_api.register("POST", "/graphql", json={"data": {"ok": True}})

    assert GraphQLClient(client.http, path="/graphql").execute("{ ok }") == {"ok": True}


@pytest.mark.unit
@pytest.mark.parametrize("body", ["not json", "<html>bad gateway</html>", ""])
def test_execute_raises_on_non_json_body(client, mock_api, body):
    """A 2xx response that is not JSON becomes a GraphQLError."""
    mock_api.register("POST", "/api", body=body)

    with pytest.raises(GraphQLError, match="response is not JSON") as exc_info:
        client.gql.execute("{ ping }")

    assert exc_info.value.status_code == 200
    assert exc_info.value.body == body


@pytest.mark.unit
@pytest.mark.parametrize("payload", [[1, 2], "data", 42, None])
def test_execute_raises_on_non_object_body(client, mock_api, payload):
    """A 2xx JSON body that is not an object becomes a GraphQLError."""
    mock_api.register("POST", "/api", body=json.dumps(payload))

    with pytest.raises(GraphQLError, match="response is not a JSON object"):
        client.gql.execute("{ ping }")
