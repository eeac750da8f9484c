"""Testing utilities for code built on the Massdriver SDK.

Example:
    ```python
    from massdriver.testing import MockAPI, make_client


    def test_get_artifact():
        api = MockAPI()
        api.register("GET", "/v1/artifacts/abc", json={"id": "abc", "name": "db"})

        with make_client(api) as client:
            artifact = ArtifactService(client).get_artifact("abc")

        assert artifact.name == "db"
        assert api.call_count == 1
    ```
"""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from massdriver.client import MassdriverClient
from massdriver.config.config import Config
from massdriver.config.credentials import Credentials

MOCK_URL = "https://api.massdriver.mock"


@dataclass
class MockResponse:
    status_code: int = 200
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


class MockAPI:
    """Canned responses keyed by ``"METHOD path"``.

    Unregistered requests get a 404 with ``{"error": "mock not found"}``.
    Every request is recorded, in order, on :attr:`requests`.
    """

    def __init__(self) -> None:
        self.responses: dict[str, MockResponse] = {}
        self.requests: list[httpx.Request] = []

    def register(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json: Any = None,
        body: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        if json is not None:
            body = _dumps(json)
        self.responses[f"{method.upper()} {path}"] = MockResponse(
            status_code=status_code, body=body, headers=dict(headers or {})
        )

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request | None:
        return self.requests[-1] if self.requests else None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        mock = self.responses.get(f"{request.method} {request.url.path}")
        if mock is None:
            return httpx.Response(
                404,
                headers={"Content-Type": "application/json"},
                content=b'{"error": "mock not found"}',
            )

        headers = {"Content-Type": "application/json", **mock.headers}
        return httpx.Response(mock.status_code, headers=headers, content=mock.body.encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


def _dumps(value: Any) -> str:
    return json.dumps(value)


def make_config(
    organization_id: str = "test-org",
    url: str = MOCK_URL,
    credentials: Credentials | None = None,
) -> Config:
    """A valid config for tests, using API key auth unless told otherwise."""
    return Config(
        organization_id=organization_id,
        url=url,
        credentials=credentials or Credentials.api_key(organization_id, "test-key"),
    )


def make_client(api: MockAPI, config: Config | None = None) -> MassdriverClient:
    """A client whose requests are answered by ``api``."""
    return MassdriverClient(config or make_config(), transport=api.transport)
