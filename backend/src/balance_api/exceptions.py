"""Request failures raised by handlers and translated by the exception handlers.

A failure may carry an HTTP status and a message; either can be missing.
Defaults are applied only at the translation boundary (``resolve_status`` /
``resolve_message``), so the response body is always the error envelope:
{"success": false, "error": "..."}.
"""

DEFAULT_STATUS = 500
DEFAULT_MESSAGE = "Internal Server Error"


class RequestFailure(Exception):
    """Classified failure. ``status`` and ``message`` are both optional."""

    def __init__(self, message: str | None = None, status: int | None = None) -> None:
        self.message = message
        self.status = status
        super().__init__(message or DEFAULT_MESSAGE)


class NotFoundError(RequestFailure):
    """Raised when no route matches the request."""

    def __init__(self, message: str = "Route not found") -> None:
        super().__init__(message, status=404)


def resolve_status(status: object) -> int:
    """Return ``status`` if it is an HTTP error code (400-599), else 500."""
    if isinstance(status, int) and not isinstance(status, bool) and 400 <= status <= 599:
        return status
    return DEFAULT_STATUS


def resolve_message(message: object) -> str:
    """Return ``message`` if it is a non-blank string, else the generic fallback."""
    if isinstance(message, str) and message.strip():
        return message
    return DEFAULT_MESSAGE
