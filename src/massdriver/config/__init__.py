"""Configuration and credential resolution for the Massdriver SDK.

Settings are gathered from:
- ``MASSDRIVER_*`` environment variables (optionally a ``.env`` file)
- A YAML profile file under ``$XDG_CONFIG_HOME/massdriver`` or ``~/.config/massdriver``
- Built-in defaults

Example:
    ```python
    from massdriver.config import load_config

    config = load_config()
    print(config.organization_id, config.url)
    ```
"""

from massdriver.config.config import DEFAULT_URL, Config, initialize_config, load_config, validate_config
from massdriver.config.credentials import AuthMethod, Credentials, basic_auth_header, resolve_credentials
from massdriver.config.environment import EnvironmentSettings, read_environment
from massdriver.config.exceptions import (
    ConfigError,
    ConfigFileError,
    DeprecatedUUIDOrganizationIDError,
    InvalidURLError,
    MissingCredentialsError,
    MissingOrganizationIDError,
    NoCredentialsError,
    UnsupportedConfigVersionError,
)
from massdriver.config.profile import ConfigFile, Profile, load_config_file, select_profile

__all__ = [
    "DEFAULT_URL",
    "AuthMethod",
    "Config",
    "ConfigError",
    "ConfigFile",
    "ConfigFileError",
    "Credentials",
    "DeprecatedUUIDOrganizationIDError",
    "EnvironmentSettings",
    "InvalidURLError",
    "MissingCredentialsError",
    "MissingOrganizationIDError",
    "NoCredentialsError",
    "Profile",
    "UnsupportedConfigVersionError",
    "basic_auth_header",
    "initialize_config",
    "load_config",
    "load_config_file",
    "read_environment",
    "resolve_credentials",
    "select_profile",
    "validate_config",
]
