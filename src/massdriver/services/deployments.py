"""Deployment service: ``/v1/deployments``."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from massdriver.errors.exceptions import InvalidTransitionError
from massdriver.errors.handler import raise_for_status
from massdriver.errors.models import ErrorResponse
from massdriver.services.base import BaseService

logger = logging.getLogger(__name__)

DEPLOYMENTS_PATH = "/v1/deployments"
DEFAULT_TRANSITION_ERROR = "failed deployment status update"


class DeploymentStatus(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    ABORTED = "ABORTED"


@dataclass
class Deployment:
    id: str
    status: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Deployment":
        return cls(id=data.get("id") or "", status=data.get("status") or "")


class DeploymentService(BaseService):
    """Report deployment progress back to Massdriver."""

    def update_deployment_status(self, deployment_id: str, status: DeploymentStatus | str) -> Deployment:
        """PATCH /v1/deployments/:id with the new status.

        Raises:
            InvalidTransitionError: If the server rejects the transition (422).
            NotFoundError: If the deployment does not exist.
            RequestFailedError: Any other non-2xx response.
        """
        status_value = status.value if isinstance(status, DeploymentStatus) else status
        response = self.http.patch(f"{DEPLOYMENTS_PATH}/{deployment_id}", json={"status": status_value})

        if response.status_code == 422:
            error_response = ErrorResponse.from_response(response)
            reason = DEFAULT_TRANSITION_ERROR
            if error_response and error_response.errors.get("status"):
                reason = error_response.errors["status"][0]
            logger.debug(f"Deployment {deployment_id} rejected transition to {status_value}: {reason}")
            raise InvalidTransitionError(
                reason,
                errors=error_response.errors if error_response else None,
                status_code=response.status_code,
                response=response,
                body=response.text,
            )

        raise_for_status(response, "update deployment status")
        return Deployment.from_dict(response.json())
