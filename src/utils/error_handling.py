"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(AppError):
    """Raised when required credentials or settings are missing or invalid."""

    def __init__(self, message: str = "Service is not configured"):
        super().__init__(message, status_code=503)


class NotFoundError(AppError):
    """Raised when a requested ticket does not exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class MalformedResponseError(AppError):
    """Raised when the model returns nothing usable or breaks the schema."""

    def __init__(self, message: str = "Model returned an unusable response"):
        super().__init__(message, status_code=502)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


def to_response(error: AppError, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    body: Dict[str, Any] = {"message": str(error), "status": "error"}
    if correlation_id:
        body["correlation_id"] = correlation_id
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
