"""Massdriver API client.

The client owns one ``httpx.Client`` pointed at the API base URL and a
:class:`~massdriver.gql.GraphQLClient` at ``<base URL>/api``. Both send the
Basic auth header and JSON content headers on every request. Resource
services wrap a client instance; see :mod:`massdriver.services`.

Example:
    ```python
    from massdriver.client import MassdriverClient
    from massdriver.services import ArtifactService

    with MassdriverClient.from_env() as client:
        artifact = ArtifactService(client).get_artifact("abc-123")
    ```
"""

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx

from massdriver.config.config import Config, load_config, validate_config
from massdriver.gql.client import GraphQLClient
from massdriver.transport.headers import HeaderInjectingTransport, default_headers

logger = logging.getLogger(__name__)


class MassdriverClient:
    """HTTP and GraphQL access to the Massdriver API for one configuration.

    The client issues exactly one request per call and adds no retries. The
    only timeout applied is the one passed in; ``None`` waits indefinitely.

    Args:
        config: Validated configuration.
        transport: Base transport to send requests with. Defaults to
            ``httpx.HTTPTransport()``; tests pass an ``httpx.MockTransport``.
        timeout: Request timeout handed to httpx as-is.

    Attributes:
        config: The configuration the client was built from.
        http: REST client rooted at ``config.url``.
        gql: GraphQL client at ``<config.url>/api``.
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float | httpx.Timeout | None = None,
    ):
        validate_config(config)
        self.config = config

        self._transport = HeaderInjectingTransport(
            wrapped_transport=transport if transport is not None else httpx.HTTPTransport(),
            headers=default_headers(config),
        )
        self.http = httpx.Client(base_url=config.url, transport=self._transport, timeout=timeout)
        self.gql = GraphQLClient(self.http)

        logger.debug(f"Created Massdriver client for {config.url}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        config_path: str | Path | None = None,
        use_dotenv: bool = False,
        transport: httpx.BaseTransport | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> "MassdriverClient":
        """Load configuration from the environment and profile file, then build a client.

        Raises:
            ConfigError: If configuration cannot be resolved or is invalid.
        """
        config = load_config(environ, config_path=config_path, use_dotenv=use_dotenv)
        return cls(config, transport=transport, timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "MassdriverClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
