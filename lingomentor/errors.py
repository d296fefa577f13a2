"""
Error taxonomy shared by services and route handlers.

Every service-layer failure is mapped onto one of these before it leaves the
service. `main.py` registers handlers that render them as `{"error": ...}`
(plus `details` for upstream failures).
"""

from __future__ import annotations


class AppError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Conflict"


class UpstreamError(AppError):
    """A third-party dependency (translation, storage) failed."""

    status_code = 500
    default_message = "Upstream service failed"

    def __init__(self, message: str | None = None, details: str | None = None):
        super().__init__(message)
        self.details = details

    def to_body(self) -> dict:
        body = super().to_body()
        if self.details:
            body["details"] = self.details
        return body


class InternalError(AppError):
    status_code = 500
    default_message = "Internal Server Error"
