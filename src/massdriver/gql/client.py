"""Minimal GraphQL client over the SDK's HTTP client.

Queries are POSTed as JSON to ``<base URL>/api`` through the same
header-injecting transport the REST services use.
"""

import logging
from typing import Any

import httpx

from massdriver.errors.exceptions import GraphQLError
from massdriver.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/api"


class GraphQLClient:
    """Execute GraphQL documents against the Massdriver API.

    Args:
        http: HTTP client whose base URL is the API root.
        path: Endpoint path relative to the base URL.
    """

    def __init__(self, http: httpx.Client, path: str = GRAPHQL_PATH):
        self._http = http
        self.path = path

    @property
    def endpoint(self) -> str:
        return str(self._http.base_url).rstrip("/") + self.path

    def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        """Run a query or mutation.

        Args:
            query: GraphQL document.
            variables: Variables for the document.
            operation_name: Operation to run when the document has several.

        Returns:
            The ``data`` member of the response.

        Raises:
            GraphQLError: If the response carries ``errors`` or is not a JSON object.
            RequestFailedError: If the HTTP status is not 2xx.
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        if operation_name:
            payload["operationName"] = operation_name

        response = self._http.post(self.path, json=payload)
        raise_for_status(response, "graphql request")

        try:
            body = response.json()
        except ValueError as e:
            raise GraphQLError(
                "graphql request failed: response is not JSON",
                status_code=response.status_code,
                response=response,
                body=response.text,
            ) from e

        if not isinstance(body, dict):
            raise GraphQLError(
                "graphql request failed: response is not a JSON object",
                status_code=response.status_code,
                response=response,
                body=response.text,
            )

        errors = body.get("errors") or []
        if errors:
            messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            logger.debug(f"GraphQL operation {operation_name or '<anonymous>'} returned {len(errors)} error(s)")
            raise GraphQLError(
                f"graphql request failed: {messages}",
                errors=errors,
                status_code=response.status_code,
                response=response,
                body=response.text,
            )

        return body.get("data") or {}
