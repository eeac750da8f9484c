"""Error handling for Massdriver API responses."""

from massdriver.errors.exceptions import (
    APIError,
    GraphQLError,
    InvalidTransitionError,
    NotFoundError,
    RequestFailedError,
    ValidationError,
)
from massdriver.errors.handler import raise_for_status
from massdriver.errors.models import ErrorResponse

__all__ = [
    "APIError",
    "ErrorResponse",
    "GraphQLError",
    "InvalidTransitionError",
    "NotFoundError",
    "RequestFailedError",
    "ValidationError",
    "raise_for_status",
]
