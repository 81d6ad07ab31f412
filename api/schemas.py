"""Pydantic schemas for API responses that are not documents themselves."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Uniform error body.

    ``error`` is only present on 500 responses and carries the underlying
    fault description.
    """

    message: str
    error: str | None = None


class MessageResponse(BaseModel):
    """Plain confirmation body (e.g. after appending a conversation message)."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


ERROR_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Document store fault"},
}
NOT_FOUND_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Not found"},
    **ERROR_RESPONSES,
}
BAD_INPUT_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    **ERROR_RESPONSES,
}
