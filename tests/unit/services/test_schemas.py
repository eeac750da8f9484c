"""Tests for the JSON schema service."""

import pytest

from massdriver.errors.exceptions import RequestFailedError
from massdriver.services.schemas import SchemaService


@pytest.fixture
def service(client):
    return SchemaService(client)


@pytest.mark.unit
@pytest.mark.parametrize(
    "method,path",
    [
        ("get_artifact_definition_schema", "/json-schemas/artifact-definition.json"),
        ("get_bundle_schema", "/json-schemas/bundle.json"),
        ("get_meta_schema", "/json-schemas/draft-7.json"),
    ],
)
def test_get_schema(service, mock_api, method, path):
    schema = {"$schema": "http://json-schema.org/draft-07/schema#", "type": "object"}
    mock_api.register("GET", path, json=schema)

    assert getattr(service, method)() == schema
    assert mock_api.last_request.url.path == path


@pytest.mark.unit
def test_get_schema_failure(service, mock_api):
    mock_api.register("GET", "/json-schemas/bundle.json", status_code=500)

    with pytest.raises(RequestFailedError) as exc_info:
        service.get_bundle_schema()

    assert "get bundle schema failed" in str(exc_info.value)
