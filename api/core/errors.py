"""Boundary error types.

Routes raise these after matching on a repository result; the handler in
``main`` renders every one of them as ``{"message": ..., "error"?: ...}``.
Only server faults carry the ``error`` field.
"""

from starlette import status


class ApiError(Exception):
    """An outcome that maps onto a non-2xx response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_body(self) -> dict[str, str]:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class BadInputError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreFaultError(ApiError):
    """The document store failed; ``error`` carries the driver's description."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str) -> None:
        super().__init__(message, error)


class ServiceUnavailableError(ApiError):
    """Readiness failed: the document store is unreachable."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
