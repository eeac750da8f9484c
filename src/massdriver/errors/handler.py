"""Error handling utilities for HTTP responses."""

import logging

import httpx

from massdriver.errors.exceptions import NotFoundError, RequestFailedError, ValidationError
from massdriver.errors.models import ErrorResponse

logger = logging.getLogger(__name__)


def status_line(response: httpx.Response) -> str:
    """Render ``"<code> <reason>"``, e.g. ``"404 Not Found"``."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def raise_for_status(response: httpx.Response, operation: str = "request") -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object
        operation: Human-readable name of the call, used as message prefix

    Raises:
        NotFoundError: 404
        ValidationError: 422
        RequestFailedError: any other non-2xx status
    """
    if response.is_success:
        return

    status_code = response.status_code
    body = response.text
    error_response = ErrorResponse.from_response(response)

    message = f"{operation} failed: {status_line(response)}"
    if error_response and error_response.to_exception_message():
        message += f": {error_response.to_exception_message()}"

    logger.debug(f"{operation} returned HTTP {status_code}")

    if status_code == 404:
        raise NotFoundError(message, status_code=status_code, response=response, body=body)

    if status_code == 422:
        raise ValidationError(
            message,
            errors=error_response.errors if error_response else None,
            status_code=status_code,
            response=response,
            body=body,
        )

    raise RequestFailedError(message, status_code=status_code, response=response, body=body)
