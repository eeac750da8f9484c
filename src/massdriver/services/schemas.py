"""JSON schema service: ``/json-schemas``."""

from typing import Any

from massdriver.errors.handler import raise_for_status
from massdriver.services.base import BaseService

Schema = dict[str, Any]

ARTIFACT_DEFINITION_SCHEMA_PATH = "/json-schemas/artifact-definition.json"
BUNDLE_SCHEMA_PATH = "/json-schemas/bundle.json"
META_SCHEMA_PATH = "/json-schemas/draft-7.json"


class SchemaService(BaseService):
    """Fetch the JSON schemas Massdriver validates bundles and artifacts against."""

    def _get_schema(self, path: str, operation: str) -> Schema:
        response = self.http.get(path)
        raise_for_status(response, operation)
        return response.json()

    def get_artifact_definition_schema(self) -> Schema:
        return self._get_schema(ARTIFACT_DEFINITION_SCHEMA_PATH, "get artifact definition schema")

    def get_bundle_schema(self) -> Schema:
        return self._get_schema(BUNDLE_SCHEMA_PATH, "get bundle schema")

    def get_meta_schema(self) -> Schema:
        """The JSON Schema draft-7 meta schema."""
        return self._get_schema(META_SCHEMA_PATH, "get draft-7 schema")
