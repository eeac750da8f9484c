"""Error payload models."""

from dataclasses import dataclass, field

import httpx


@dataclass
class ErrorResponse:
    """Error body returned by the Massdriver REST API.

    The API answers failures with either a framework error
    (``{"error": "..."}``) or field validation errors
    (``{"errors": {"field": ["message", ...]}}``).
    """

    error: str | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorResponse | None":
        """Parse an error body from an HTTP response.

        Returns:
            ErrorResponse, or None if the body is not a JSON object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            return None

        if not isinstance(data, dict):
            return None

        error = data.get("error")
        raw_errors = data.get("errors")

        errors: dict[str, list[str]] = {}
        if isinstance(raw_errors, dict):
            for key, value in raw_errors.items():
                if isinstance(value, list):
                    errors[str(key)] = [str(v) for v in value]
                elif value is not None:
                    errors[str(key)] = [str(value)]

        return cls(error=str(error) if error else None, errors=errors)

    def is_framework_error(self) -> bool:
        return bool(self.error)

    def is_validation_error(self) -> bool:
        return len(self.errors) > 0

    def to_exception_message(self) -> str:
        """Convert the error body to a one-line message."""
        parts = []

        if self.error:
            parts.append(self.error)

        for key, messages in self.errors.items():
            parts.append(f"{key}: {', '.join(messages)}")

        return "; ".join(parts)
