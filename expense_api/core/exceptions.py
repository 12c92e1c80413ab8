"""
Application-level exceptions.

Services raise these; the handlers in ``expense_api.core.error_handlers``
turn them into the uniform error payload. Nothing else renders errors.
"""
from typing import TYPE_CHECKING, Any, List

from fastapi import status

if TYPE_CHECKING:
    from expense_api.v1_0.validators.result import FieldError


class ApplicationError(Exception):
    """
    Base class for failures with a known HTTP mapping.

    - message: human-friendly text, safe to show to clients
    - error_code: canonical code placed in the ``errorCode`` field
    - status_code: HTTP status that accompanies the payload
    """

    error_code: str = "INTERNAL_SERVER_ERROR"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ResourceNotFoundError(ApplicationError):
    """A requested id has no persisted row."""

    error_code = "RESOURCE_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, field: str, value: Any) -> None:
        super().__init__(f"{resource} not found with {field}: {value}")
        self.resource = resource
        self.field = field
        self.value = value


class ConflictError(ApplicationError):
    """The write would break a store-level integrity rule."""

    error_code = "RESOURCE_CONFLICT"
    status_code = status.HTTP_409_CONFLICT


class ValidationFailedError(ApplicationError):
    """Input passed decoding but failed an explicit validation rule."""

    error_code = "VALIDATION_FAILED"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List["FieldError"]) -> None:
        self.errors = list(errors)
        super().__init__(
            "; ".join(f"{e.field}: {e.message}" for e in self.errors) or "Validation failed"
        )

__all__ = [
    "ApplicationError",
    "ResourceNotFoundError",
    "ConflictError",
    "ValidationFailedError",
]
