"""Massdriver SDK - Python client for the Massdriver platform API.

This library provides:
- Credential resolution from environment variables and profile files
- An authenticated HTTP and GraphQL client
- Thin services for artifacts, deployments, package alarms and JSON schemas

Example:
    ```python
    from massdriver import MassdriverClient, load_config
    from massdriver.services import ArtifactService

    # Resolve credentials and settings once, at startup
    config = load_config()

    with MassdriverClient(config) as client:
        artifact = ArtifactService(client).get_artifact("abc-123")
    ```
"""

from massdriver.client import MassdriverClient
from massdriver.config import Config, load_config

__version__ = "0.1.0"

__all__ = ["Config", "MassdriverClient", "__version__", "load_config"]
