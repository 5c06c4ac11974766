"""Response envelope shared by every JSON endpoint except /health.

SuccessResponse[T] — {"success": true, "data": T}
ErrorResponse      — {"success": false, "error": "..."}

``success`` is a Literal, so each model only ever serializes its own
variant: an envelope never carries both ``data`` and ``error``.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Success variant. Parametrize per endpoint::

        @router.get("/balance", response_model=SuccessResponse[Balance])
    """

    success: Literal[True] = True
    data: T


class ErrorResponse(BaseModel):
    """Failure variant returned by all exception handlers."""

    success: Literal[False] = False
    error: str = Field(min_length=1)


def build_success(data: T) -> SuccessResponse[T]:
    """Wrap a payload in the success envelope."""
    return SuccessResponse(data=data)


def build_error(message: str) -> ErrorResponse:
    """Wrap a message in the failure envelope."""
    return ErrorResponse(error=message)


def envelope_json(envelope: SuccessResponse[Any] | ErrorResponse) -> dict[str, Any]:
    """Dump an envelope as a dict ready for JSONResponse."""
    return envelope.model_dump(mode="json")
