"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.body = body


class RequestFailedError(APIError):
    """Any non-2xx response without a more specific mapping."""

    pass


class NotFoundError(RequestFailedError):
    """404 Not Found."""

    pass


class ValidationError(RequestFailedError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors if errors is not None else {}


class InvalidTransitionError(ValidationError):
    """422 on a deployment status update: the transition is not allowed."""

    def __init__(self, reason: str, **kwargs):
        super().__init__(f"invalid deployment transition: {reason}", **kwargs)
        self.reason = reason


class GraphQLError(APIError):
    """A GraphQL response that carried an ``errors`` list or was not a JSON object."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors if errors is not None else []
