"""Header-injecting transport.

Wraps another httpx transport and stamps a fixed set of headers on every
outbound request before handing it on. The Massdriver client uses it to add
``Authorization``, ``Content-Type`` and ``Accept`` to REST and GraphQL calls.

```python
from massdriver.transport import HeaderInjectingTransport
import httpx

transport = HeaderInjectingTransport(
    wrapped_transport=httpx.HTTPTransport(),
    headers={"Authorization": "Basic ..."},
)

with httpx.Client(transport=transport) as client:
    response = client.get("https://api.massdriver.cloud/v1/artifacts/abc")
```
"""

import logging
from collections.abc import Mapping

import httpx

from massdriver.config.config import Config

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def default_headers(config: Config) -> dict[str, str]:
    """Headers every Massdriver API request carries.

    Args:
        config: Validated configuration with credentials.
    """
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
    }
    if config.credentials is not None:
        headers["Authorization"] = config.credentials.auth_header_value
    return headers


class HeaderInjectingTransport(httpx.BaseTransport):
    """Transport that sets fixed headers on each request.

    Headers are overwritten, not appended, so a value set here always wins
    over one set on the request.

    Args:
        wrapped_transport: The underlying transport to wrap
        headers: Header names and values to set
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport,
        headers: Mapping[str, str],
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self._headers = dict(headers)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def __enter__(self):
        """Enter context, delegating to wrapped transport."""
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context, delegating to wrapped transport."""
        self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Set the configured headers and forward the request.

        Args:
            request: The HTTP request to send

        Returns:
            HTTP response from the wrapped transport
        """
        for name, value in self._headers.items():
            request.headers[name] = value

        logger.debug(f"{request.method} {request.url}")
        return self._wrapped_transport.handle_request(request)

    def close(self) -> None:
        self._wrapped_transport.close()
