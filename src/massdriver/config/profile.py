"""Profile file loading.

Profiles live in a YAML file at ``$XDG_CONFIG_HOME/massdriver/config.yaml``
(or ``~/.config/massdriver/config.yaml`` when ``XDG_CONFIG_HOME`` is unset):

```yaml
version: 1
profiles:
  default:
    organization_id: my-org
    api_key: xxxxxxxx
  staging:
    organization_id: my-org
    api_key: yyyyyyyy
    url: https://api.staging.massdriver.cloud
```

A missing file is not an error. A file that exists but cannot be read or
parsed, or that declares any version other than 1, is.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from massdriver.config.exceptions import ConfigFileError, UnsupportedConfigVersionError

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1
DEFAULT_PROFILE = "default"
CONFIG_PATH_FROM_CONFIG_DIR = Path("massdriver") / "config.yaml"


@dataclass(frozen=True)
class Profile:
    """A named bundle of organization ID, API key and URL."""

    organization_id: str = ""
    api_key: str = field(default="", repr=False)
    url: str = ""


@dataclass(frozen=True)
class ConfigFile:
    """Parsed contents of the profile file."""

    version: int
    profiles: dict[str, Profile] = field(default_factory=dict)


def config_file_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the location of the profile file.

    Args:
        environ: Environment mapping to consult. Defaults to ``os.environ``.
    """
    if environ is None:
        environ = os.environ

    xdg_config_home = environ.get("XDG_CONFIG_HOME", "")
    if xdg_config_home:
        return Path(xdg_config_home) / CONFIG_PATH_FROM_CONFIG_DIR

    home = environ.get("HOME", "")
    home_dir = Path(home) if home else Path.home()
    return home_dir / ".config" / CONFIG_PATH_FROM_CONFIG_DIR


def _parse_profile(name: str, raw: Any, path: Path) -> Profile:
    if raw is None:
        return Profile()
    if not isinstance(raw, dict):
        raise ConfigFileError(f"profile '{name}' in config file {path} must be a mapping", path=path)

    return Profile(
        organization_id=str(raw.get("organization_id") or ""),
        api_key=str(raw.get("api_key") or ""),
        url=str(raw.get("url") or ""),
    )


def parse_config_file(content: str, path: Path) -> ConfigFile:
    """Parse profile file content.

    Args:
        content: Raw YAML text.
        path: Where the content came from, used in error messages.

    Raises:
        ConfigFileError: If the YAML is malformed or has the wrong shape.
        UnsupportedConfigVersionError: If the version is not 1.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"could not unmarshal config file {path}: {e}", path=path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFileError(f"could not unmarshal config file {path}: expected a mapping", path=path)

    version = data.get("version", 0)
    if version != SUPPORTED_VERSION or isinstance(version, bool):
        raise UnsupportedConfigVersionError(version, path=path)

    raw_profiles = data.get("profiles") or {}
    if not isinstance(raw_profiles, dict):
        raise ConfigFileError(f"'profiles' in config file {path} must be a mapping", path=path)

    profiles = {str(name): _parse_profile(str(name), raw, path) for name, raw in raw_profiles.items()}
    return ConfigFile(version=version, profiles=profiles)


def load_config_file(path: str | Path) -> ConfigFile | None:
    """Load the profile file at ``path``.

    Returns:
        The parsed file, or None if no file exists at ``path``.

    Raises:
        ConfigFileError: If the file exists but cannot be read or parsed.
        UnsupportedConfigVersionError: If the file declares a version other than 1.
    """
    path_obj = Path(path)

    try:
        content = path_obj.read_text()
    except FileNotFoundError:
        logger.debug(f"No config file at {path_obj}")
        return None
    except OSError as e:
        raise ConfigFileError(f"could not read config file {path_obj}: {e}", path=path_obj) from e

    config_file = parse_config_file(content, path_obj)
    logger.debug(f"Loaded config file {path_obj} with {len(config_file.profiles)} profile(s)")
    return config_file


def select_profile(config_file: ConfigFile | None, name: str = "") -> tuple[str, Profile]:
    """Pick a profile by name.

    Args:
        config_file: Parsed profile file, or None if there is none.
        name: Profile name. Empty means ``"default"``.

    Returns:
        ``(applied_name, profile)``. When the profile does not exist the
        applied name is empty and the profile is blank.
    """
    profile_name = name or DEFAULT_PROFILE

    if config_file is None or profile_name not in config_file.profiles:
        if config_file is not None:
            logger.debug(f"Profile '{profile_name}' not found in config file")
        return "", Profile()

    logger.debug(f"Using profile '{profile_name}'")
    return profile_name, config_file.profiles[profile_name]
