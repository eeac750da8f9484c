"""Credential resolution for the Massdriver API.

Resolution order (first full match wins, values are never mixed across tiers):

1. ``MASSDRIVER_DEPLOYMENT_ID`` + ``MASSDRIVER_TOKEN`` → deployment auth
2. Organization ID (``MASSDRIVER_ORGANIZATION_ID``, ``MASSDRIVER_ORG_ID``,
   then the selected profile) + API key (``MASSDRIVER_API_KEY``, then the
   selected profile) → API key auth
3. Otherwise :class:`NoCredentialsError`

Both methods authenticate with HTTP Basic auth over ``<id>:<secret>``.

Example:
    ```python
    from massdriver.config.credentials import resolve_credentials
    from massdriver.config.environment import read_environment

    credentials = resolve_credentials(read_environment())
    headers = {"Authorization": credentials.auth_header_value}
    ```

Security Considerations:
    - Secrets are never logged and are masked in ``repr``
    - Only the resolved method and ID are logged
"""

import base64
import logging
from dataclasses import dataclass, field
from enum import Enum

from massdriver.config.environment import EnvironmentSettings, coalesce
from massdriver.config.exceptions import NoCredentialsError
from massdriver.config.profile import Profile

logger = logging.getLogger(__name__)


class AuthMethod(str, Enum):
    """How the SDK authenticates."""

    DEPLOYMENT = "deployment"
    API_KEY = "api_key"


def basic_auth_header(identity: str, secret: str) -> str:
    """Build an HTTP Basic ``Authorization`` header value for ``identity:secret``."""
    encoded = base64.b64encode(f"{identity}:{secret}".encode()).decode("ascii")
    return f"Basic {encoded}"


@dataclass(frozen=True)
class Credentials:
    """An ID/secret pair and the method it authenticates with.

    Attributes:
        method: Deployment or API key auth.
        id: Deployment ID or organization ID.
        secret: Deployment token or API key.
    """

    method: AuthMethod
    id: str
    secret: str = field(repr=False)

    @classmethod
    def deployment(cls, deployment_id: str, token: str) -> "Credentials":
        return cls(method=AuthMethod.DEPLOYMENT, id=deployment_id, secret=token)

    @classmethod
    def api_key(cls, organization_id: str, api_key: str) -> "Credentials":
        return cls(method=AuthMethod.API_KEY, id=organization_id, secret=api_key)

    @property
    def auth_header_value(self) -> str:
        """``Authorization`` header value, ``Basic base64(id:secret)``."""
        return basic_auth_header(self.id, self.secret)

    @property
    def is_complete(self) -> bool:
        return bool(self.id) and bool(self.secret)


def resolve_credentials(settings: EnvironmentSettings, profile: Profile | None = None) -> Credentials:
    """Resolve credentials from environment settings and the selected profile.

    Args:
        settings: Values read from environment variables.
        profile: The selected profile, if any.

    Returns:
        Fully populated credentials.

    Raises:
        NoCredentialsError: If no tier supplies both an ID and a secret.
    """
    if profile is None:
        profile = Profile()

    if settings.deployment_id and settings.deployment_token:
        logger.debug(f"Resolved deployment credentials for deployment '{settings.deployment_id}'")
        return Credentials.deployment(settings.deployment_id, settings.deployment_token)

    organization_id = coalesce(settings.organization_id, settings.org_id, profile.organization_id)
    api_key = coalesce(settings.api_key, profile.api_key)
    if organization_id and api_key:
        logger.debug(f"Resolved API key credentials for organization '{organization_id}'")
        return Credentials.api_key(organization_id, api_key)

    raise NoCredentialsError()
