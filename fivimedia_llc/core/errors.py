"""Error types for the ordering service.

Defines a small hierarchy of exceptions raised by services to signal invalid
input, missing records and authorization failures. Each error carries the
HTTP status code the API layer reports for it.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base error for all service-layer exceptions."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Raised when a request violates a business rule."""

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when a referenced record does not exist."""

    status_code = 404

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class AuthenticationError(ServiceError):
    """Raised when a request lacks a valid admin session."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
