"""Environment variable settings for the Massdriver SDK.

Values are read from a mapping (``os.environ`` by default) and, optionally,
from a ``.env`` file loaded with python-dotenv. Variables set in the real
environment always take priority over values from the ``.env`` file, and the
``.env`` file is never written back into ``os.environ``.

Recognized variables:

| Variable | Field |
|----------|-------|
| ``MASSDRIVER_ORGANIZATION_ID`` | ``organization_id`` |
| ``MASSDRIVER_ORG_ID`` | ``org_id`` |
| ``MASSDRIVER_API_KEY`` | ``api_key`` |
| ``MASSDRIVER_DEPLOYMENT_ID`` | ``deployment_id`` |
| ``MASSDRIVER_TOKEN`` | ``deployment_token`` |
| ``MASSDRIVER_PROFILE`` | ``profile`` |
| ``MASSDRIVER_URL`` (or legacy ``MASSDRIVER_API_URL``) | ``url`` |

Example:
    ```python
    from massdriver.config.environment import read_environment

    settings = read_environment(use_dotenv=True)
    print(settings.profile or "default")
    ```
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "MASSDRIVER_"

ORGANIZATION_ID_ENV = f"{ENV_PREFIX}ORGANIZATION_ID"
ORG_ID_ENV = f"{ENV_PREFIX}ORG_ID"
API_KEY_ENV = f"{ENV_PREFIX}API_KEY"
DEPLOYMENT_ID_ENV = f"{ENV_PREFIX}DEPLOYMENT_ID"
TOKEN_ENV = f"{ENV_PREFIX}TOKEN"
PROFILE_ENV = f"{ENV_PREFIX}PROFILE"
URL_ENV = f"{ENV_PREFIX}URL"
LEGACY_URL_ENV = f"{ENV_PREFIX}API_URL"

_SECRET_VARS = frozenset([API_KEY_ENV, TOKEN_ENV])


def coalesce(*values: str | None) -> str:
    """Return the first non-empty value, or an empty string if there is none."""
    for value in values:
        if value:
            return value
    return ""


@dataclass(frozen=True)
class EnvironmentSettings:
    """Raw, unvalidated settings taken from environment variables.

    Empty strings mean "not set".
    """

    organization_id: str = ""
    org_id: str = ""
    api_key: str = ""
    deployment_id: str = ""
    deployment_token: str = ""
    profile: str = ""
    url: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "EnvironmentSettings":
        """Build settings from an environment mapping."""
        return cls(
            organization_id=environ.get(ORGANIZATION_ID_ENV, ""),
            org_id=environ.get(ORG_ID_ENV, ""),
            api_key=environ.get(API_KEY_ENV, ""),
            deployment_id=environ.get(DEPLOYMENT_ID_ENV, ""),
            deployment_token=environ.get(TOKEN_ENV, ""),
            profile=environ.get(PROFILE_ENV, ""),
            url=coalesce(environ.get(URL_ENV), environ.get(LEGACY_URL_ENV)),
        )


def _mask(name: str, value: str) -> str:
    if name in _SECRET_VARS:
        return "***"
    return value


def read_environment(
    environ: Mapping[str, str] | None = None,
    *,
    use_dotenv: bool = False,
    dotenv_path: str | Path | None = None,
) -> EnvironmentSettings:
    """Read Massdriver settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
        use_dotenv: Whether to also read a ``.env`` file. Values from the file
            only fill variables that are absent from ``environ``.
        dotenv_path: Path to the ``.env`` file. If None, python-dotenv searches
            upward from the current working directory.

    Returns:
        The collected settings.
    """
    if environ is None:
        environ = os.environ

    merged: dict[str, str] = {}
    if use_dotenv:
        file_values = dotenv_values(dotenv_path or find_dotenv(usecwd=True))
        merged.update({k: v for k, v in file_values.items() if k.startswith(ENV_PREFIX) and v is not None})
        if merged:
            logger.debug(f"Loaded {len(merged)} Massdriver variable(s) from .env file")

    merged.update({k: v for k, v in environ.items() if k.startswith(ENV_PREFIX)})

    for name in sorted(merged):
        logger.debug(f"Found environment variable {name}={_mask(name, merged[name])}")

    return EnvironmentSettings.from_environ(merged)
