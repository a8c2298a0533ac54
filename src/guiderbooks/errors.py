"""
Domain exception hierarchy for the Guiderbooks API.

Every error inherits from GuiderbooksError and carries:
- message: human-readable description, safe to return to the caller
- error_code: machine-readable string (e.g. "CHAPTER_NOT_FOUND")
- status_code: HTTP status code used at the route boundary
- context: optional structured metadata for logs
"""

from typing import Any, Dict, Optional


class GuiderbooksError(Exception):
    """Base exception for all Guiderbooks domain errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.context = context or {}
        super().__init__(message)


class ValidationError(GuiderbooksError):
    """Missing or malformed request fields."""

    def __init__(
        self,
        message: str,
        error_code: str = "INVALID_REQUEST",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=error_code, status_code=400, context=context)


class NotFoundError(GuiderbooksError):
    """Identifier resolved to nothing."""

    def __init__(
        self,
        message: str = "Chapter not found",
        error_code: str = "CHAPTER_NOT_FOUND",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=error_code, status_code=404, context=context)


class RateLimitError(GuiderbooksError):
    """Completion service quota or rate limit reached."""

    def __init__(
        self,
        message: str = "API rate limit exceeded. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code="RATE_LIMIT_EXCEEDED", status_code=429, context=context)


class ConfigurationError(GuiderbooksError):
    """Missing or rejected server-side credential. Not user-actionable."""

    def __init__(
        self,
        message: str = "OpenAI API configuration error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code="CONFIGURATION_ERROR", status_code=500, context=context)


class ContentTooLongError(GuiderbooksError):
    """Prompt exceeds what the completion service accepts."""

    def __init__(
        self,
        message: str = "The content is too long. Please try a shorter question or chapter.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code="CONTENT_TOO_LONG", status_code=500, context=context)


class GenerationError(GuiderbooksError):
    """Any other completion service or transport failure."""

    def __init__(
        self,
        message: str = "Failed to generate response. Please try again.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code="GENERATION_FAILED", status_code=500, context=context)


class CoercionError(GuiderbooksError):
    """Model output could not be turned into the expected structure."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="COERCION_FAILED", status_code=500, context=context)


class StoreUnavailableError(GuiderbooksError):
    """Document store is not configured for this process."""

    def __init__(
        self,
        message: str = "Document store is not configured",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code="STORE_UNAVAILABLE", status_code=503, context=context)
