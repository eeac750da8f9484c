"""Base class for resource services."""

import httpx

from massdriver.client import MassdriverClient


class BaseService:
    """Common plumbing for services that wrap a :class:`MassdriverClient`.

    Subclasses add one method per API operation, each issuing a single
    request through :attr:`http`.
    """

    def __init__(self, client: MassdriverClient):
        self._client = client

    @property
    def http(self) -> httpx.Client:
        return self._client.http
