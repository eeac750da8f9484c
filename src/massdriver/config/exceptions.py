"""Exceptions raised while resolving and validating SDK configuration.

Every configuration problem is terminal: the SDK never retries or falls back
once one of these is raised, the caller decides what to do.

Example:
    ```python
    from massdriver.config import load_config
    from massdriver.config.exceptions import ConfigError

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Massdriver is not configured: {e}")
    ```
"""

from pathlib import Path


class ConfigError(Exception):
    """Base exception for configuration errors.

    All configuration-specific exceptions inherit from this class,
    making it easy to catch any configuration-related error.
    """

    pass


class NoCredentialsError(ConfigError):
    """Raised when neither deployment nor API key credentials can be resolved."""

    def __init__(self, message: str = "no credentials found"):
        super().__init__(message)


class MissingOrganizationIDError(ConfigError):
    """Raised when no organization ID was resolved from any source."""

    def __init__(self, message: str = "organization ID is required"):
        super().__init__(message)


class MissingCredentialsError(ConfigError):
    """Raised when a config carries no credentials, or only half of a pair."""

    def __init__(self, message: str = "credentials are required"):
        super().__init__(message)


class DeprecatedUUIDOrganizationIDError(ConfigError):
    """Raised when the organization ID is a legacy UUID.

    Attributes:
        organization_id: The rejected organization ID.
    """

    def __init__(self, organization_id: str):
        super().__init__(
            "organization ID is a UUID. This is deprecated and will be removed in a future release, "
            "please use the organization abbreviation instead"
        )
        self.organization_id = organization_id


class InvalidURLError(ConfigError):
    """Raised when the API URL is unparsable or lacks a scheme or host.

    Attributes:
        url: The rejected URL.
    """

    def __init__(self, url: str):
        super().__init__("url must include scheme and host (e.g., https://api.massdriver.cloud)")
        self.url = url


class ConfigFileError(ConfigError):
    """Raised when the profile file exists but cannot be read or parsed.

    Attributes:
        path: Location of the offending file, if known.
    """

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class UnsupportedConfigVersionError(ConfigFileError):
    """Raised when the profile file declares a version other than 1.

    Attributes:
        version: The version found in the file.
    """

    def __init__(self, version: object, path: Path | None = None):
        super().__init__(f"unsupported config file version: {version}  expected version 1", path=path)
        self.version = version
