"""Thin wrappers over the Massdriver REST API, one method per endpoint.

Example:
    ```python
    from massdriver.services import DeploymentService, DeploymentStatus

    DeploymentService(client).update_deployment_status("deploy-123", DeploymentStatus.COMPLETED)
    ```
"""

from massdriver.services.artifacts import Artifact, ArtifactService
from massdriver.services.deployments import Deployment, DeploymentService, DeploymentStatus
from massdriver.services.package_alarms import Alarm, Dimension, Metric, PackageAlarmService
from massdriver.services.schemas import Schema, SchemaService

__all__ = [
    "Alarm",
    "Artifact",
    "ArtifactService",
    "Deployment",
    "DeploymentService",
    "DeploymentStatus",
    "Dimension",
    "Metric",
    "PackageAlarmService",
    "Schema",
    "SchemaService",
]
