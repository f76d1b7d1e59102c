"""
Custom exception classes for the Collections Call-Assist Service.
"""
from typing import Optional, Any, Dict
import uuid
from fastapi import HTTPException, status


class BaseAPIException(HTTPException):
    """Base exception for API errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.detail,
            "correlation_id": self.correlation_id,
            "context": self.context,
        }


class ValidationError(BaseAPIException):
    """Exception for validation errors."""

    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **context
    ):
        error_code = "CAS_001"
        if field:
            error_code = f"CAS_001_{field.upper()}"
            detail = f"Validation failed for field '{field}': {detail}"

        context_dict = {"field": field, "value": value, **context}

        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=error_code,
            context=context_dict,
        )


class NotFoundError(BaseAPIException):
    """Exception for unknown resources."""

    def __init__(self, resource: str, resource_id: str, **context):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} '{resource_id}' not found",
            error_code="CAS_002",
            context={"resource": resource, "resource_id": resource_id, **context},
        )


# Generative backend exceptions
class GenerativeBackendError(Exception):
    """Base exception for generative backend failures."""

    kind = "backend_error"

    def __init__(self, message: str, **context):
        self.message = message
        self.context = context
        super().__init__(message)


class BackendNotConfiguredError(GenerativeBackendError):
    """The API credential is missing or still set to the placeholder."""

    kind = "not_configured"

    def __init__(self, message: str = "Gemini API key not configured. Set GEMINI_API_KEY in the environment."):
        super().__init__(message)


class BackendTransportError(GenerativeBackendError):
    """Network or connection failure talking to the backend."""

    kind = "transport"


class BackendHTTPStatusError(GenerativeBackendError):
    """Backend answered with a non-success HTTP status."""

    kind = "http_status"

    def __init__(self, status_code: int, **context):
        self.status_code = status_code
        super().__init__(f"API request failed with status {status_code}", status_code=status_code, **context)


class BackendReportedError(GenerativeBackendError):
    """Backend returned a structured error payload."""

    kind = "backend_reported"


class BackendEmptyResponseError(GenerativeBackendError):
    """Backend returned no candidate output."""

    kind = "empty_response"

    def __init__(self, message: str = "No response generated"):
        super().__init__(message)


# Non-API context exceptions
class ValidationException(Exception):
    """Exception for validation errors outside API context."""

    def __init__(self, detail: str, field: Optional[str] = None, value: Optional[Any] = None):
        self.detail = detail
        self.field = field
        self.value = value
        message = f"Validation failed: {detail}"
        if field:
            message = f"Validation failed for field '{field}': {detail}"
        super().__init__(message)


def map_validation_exception(exc: ValidationException) -> ValidationError:
    """Map a service-level validation failure to an API exception."""
    return ValidationError(detail=exc.detail, field=exc.field, value=exc.value)


def get_user_friendly_error_message(error_code: str) -> str:
    """Get user-friendly error message for error code."""
    error_messages = {
        "CAS_001": "Validation failed. Please check your input.",
        "CAS_002": "The requested account could not be found.",
    }
    base_code = "_".join(error_code.split("_")[:2]) if error_code else error_code
    return error_messages.get(base_code, "An error occurred. Please try again.")
