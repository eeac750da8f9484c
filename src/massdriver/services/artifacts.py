"""Artifact service: ``/v1/artifacts``."""

import logging
from dataclasses import dataclass, field
from typing import Any

from massdriver.errors.handler import raise_for_status
from massdriver.services.base import BaseService

logger = logging.getLogger(__name__)

ARTIFACTS_PATH = "/v1/artifacts"


@dataclass
class Artifact:
    """An artifact produced by a deployment."""

    type: str = ""
    name: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    specs: dict[str, Any] = field(default_factory=dict)
    id: str = ""
    field: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Request body; ``id`` and ``field`` are omitted when empty."""
        payload: dict[str, Any] = {}
        if self.id:
            payload["id"] = self.id
        if self.field:
            payload["field"] = self.field
        payload.update(type=self.type, name=self.name, data=self.data, specs=self.specs)
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Artifact":
        return cls(
            type=data.get("type") or "",
            name=data.get("name") or "",
            data=data.get("data") or {},
            specs=data.get("specs") or {},
            id=data.get("id") or "",
            field=data.get("field") or "",
        )


class ArtifactService(BaseService):
    """Create, read, update and delete artifacts."""

    def create_artifact(self, artifact: Artifact) -> Artifact:
        """POST /v1/artifacts"""
        response = self.http.post(ARTIFACTS_PATH, json=artifact.to_payload())
        raise_for_status(response, "create artifact")
        return Artifact.from_dict(response.json())

    def get_artifact(self, artifact_id: str) -> Artifact:
        """GET /v1/artifacts/:id

        Raises:
            NotFoundError: If the artifact does not exist.
        """
        response = self.http.get(f"{ARTIFACTS_PATH}/{artifact_id}")
        raise_for_status(response, "get artifact")
        return Artifact.from_dict(response.json())

    def update_artifact(self, artifact_id: str, artifact: Artifact) -> Artifact:
        """PUT /v1/artifacts/:id"""
        response = self.http.put(f"{ARTIFACTS_PATH}/{artifact_id}", json=artifact.to_payload())
        raise_for_status(response, "update artifact")
        return Artifact.from_dict(response.json())

    def delete_artifact(self, artifact_id: str, field: str) -> None:
        """DELETE /v1/artifacts/:id, naming the artifact field in the body."""
        response = self.http.request("DELETE", f"{ARTIFACTS_PATH}/{artifact_id}", json={"field": field})
        raise_for_status(response, "delete artifact")
        logger.debug(f"Deleted artifact {artifact_id}")
