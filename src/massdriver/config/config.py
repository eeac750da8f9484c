"""Resolved SDK configuration.

:func:`load_config` is the entry point: it reads the environment and the
profile file, resolves credentials and validates the result. The returned
:class:`Config` is immutable; build it once and hand it to the clients that
need it.

Example:
    ```python
    from massdriver.client import MassdriverClient
    from massdriver.config import load_config

    config = load_config()
    with MassdriverClient(config) as client:
        ...
    ```
"""

import logging
import re
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import httpx

from massdriver.config.credentials import Credentials, resolve_credentials
from massdriver.config.environment import EnvironmentSettings, coalesce, read_environment
from massdriver.config.exceptions import (
    DeprecatedUUIDOrganizationIDError,
    InvalidURLError,
    MissingCredentialsError,
    MissingOrganizationIDError,
)
from massdriver.config.profile import ConfigFile, config_file_path, load_config_file, select_profile

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://api.massdriver.cloud"


@dataclass(frozen=True)
class Config:
    """Validated configuration for talking to the Massdriver API.

    Attributes:
        organization_id: Organization abbreviation.
        url: API base URL.
        profile: Name of the profile that was applied, or empty.
        credentials: Resolved credentials.
    """

    organization_id: str
    url: str = DEFAULT_URL
    profile: str = ""
    credentials: Credentials | None = None


def initialize_config(settings: EnvironmentSettings, config_file: ConfigFile | None = None) -> Config:
    """Combine environment settings and the profile file into a config.

    Environment values win over profile values; the URL falls back to
    :data:`DEFAULT_URL`. The result is not validated.

    Raises:
        NoCredentialsError: If no credentials can be resolved.
    """
    profile_name, profile = select_profile(config_file, settings.profile)

    return Config(
        organization_id=coalesce(settings.organization_id, settings.org_id, profile.organization_id),
        url=coalesce(settings.url, profile.url, DEFAULT_URL),
        profile=profile_name,
        credentials=resolve_credentials(settings, profile),
    )


_HEX = "[0-9a-fA-F]"
_HYPHENATED = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
# Hyphenated, urn:uuid: prefixed, braced, or 32 bare hex digits.
UUID_PATTERN = re.compile(rf"(?:[uU][rR][nN]:[uU][uU][iI][dD]:)?{_HYPHENATED}|\{{{_HYPHENATED}\}}|{_HEX}{{32}}")


def is_uuid(value: str) -> bool:
    """Whether ``value`` is a UUID of any version in one of its standard text forms."""
    if not UUID_PATTERN.fullmatch(value):
        return False
    try:
        uuid.UUID(value.lower())
    except ValueError:
        return False
    return True


def validate_url(url: str) -> None:
    """Raise :class:`InvalidURLError` unless ``url`` has a scheme and a host.

    Whitespace and control characters are rejected outright, and the URL must
    parse with httpx, so anything accepted here can be used as a client base URL.
    """
    if any(c.isspace() or not c.isprintable() for c in url):
        raise InvalidURLError(url)

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(url) from e

    if not parsed.scheme or not parsed.host:
        raise InvalidURLError(url)


def validate_config(config: Config) -> None:
    """Check a config, raising the first problem found.

    Checks run in a fixed order: organization ID present, credentials
    complete, organization ID not a UUID, URL well formed.
    """
    if not config.organization_id:
        raise MissingOrganizationIDError()

    if config.credentials is None or not config.credentials.is_complete:
        raise MissingCredentialsError()

    if is_uuid(config.organization_id):
        raise DeprecatedUUIDOrganizationIDError(config.organization_id)

    validate_url(config.url)


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    config_path: str | Path | None = None,
    use_dotenv: bool = False,
    dotenv_path: str | Path | None = None,
) -> Config:
    """Resolve and validate configuration from the environment and profile file.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
        config_path: Profile file location. Defaults to
            :func:`~massdriver.config.profile.config_file_path`.
        use_dotenv: Whether to read a ``.env`` file as well.
        dotenv_path: Explicit ``.env`` location.

    Returns:
        A validated config.

    Raises:
        ConfigError: Any resolution or validation failure.
    """
    settings = read_environment(environ, use_dotenv=use_dotenv, dotenv_path=dotenv_path)
    config_file = load_config_file(config_path if config_path is not None else config_file_path(environ))

    config = initialize_config(settings, config_file)
    validate_config(config)

    method = config.credentials.method.value if config.credentials else "none"
    logger.debug(
        f"Loaded configuration for organization '{config.organization_id}' "
        f"(url={config.url}, profile={config.profile or '-'}, auth={method})"
    )
    return config
