"""Tests for API exception classes."""

import pytest

from massdriver.errors.exceptions import (
    APIError,
    GraphQLError,
    InvalidTransitionError,
    NotFoundError,
    RequestFailedError,
    ValidationError,
)


@pytest.mark.unit
def test_api_error_attributes():
    """Test APIError carries status code and body."""
    error = APIError("Test error", status_code=500, body='{"error":"boom"}')

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.response is None
    assert error.body == '{"error":"boom"}'


@pytest.mark.unit
def test_specific_errors_are_request_failed_errors():
    """Test that mapped errors can be caught as RequestFailedError."""
    for exc in (NotFoundError("x"), ValidationError("x"), InvalidTransitionError("x")):
        assert isinstance(exc, RequestFailedError)
        assert isinstance(exc, APIError)


@pytest.mark.unit
def test_validation_error_defaults_errors_to_empty():
    """Test ValidationError.errors is never None."""
    assert ValidationError("bad").errors == {}
    assert ValidationError("bad", errors={"name": ["is required"]}).errors == {"name": ["is required"]}


@pytest.mark.unit
def test_invalid_transition_error_message():
    """Test InvalidTransitionError formats the server reason."""
    error = InvalidTransitionError("cannot transition from COMPLETED to RUNNING", status_code=422)

    assert str(error) == "invalid deployment transition: cannot transition from COMPLETED to RUNNING"
    assert error.reason == "cannot transition from COMPLETED to RUNNING"
    assert error.status_code == 422


@pytest.mark.unit
def test_graphql_error_carries_errors():
    """Test GraphQLError keeps the raw errors list."""
    error = GraphQLError("failed", errors=[{"message": "nope"}])

    assert error.errors == [{"message": "nope"}]
    assert not isinstance(error, RequestFailedError)
