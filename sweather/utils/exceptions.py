"""
Custom exception hierarchy for Sweather.

Provides a structured exception hierarchy for different error scenarios:
- AppException: Base for all application errors
- ConfigError: Configuration-related errors
- StorageError: Wardrobe persistence errors
- GatewayError: Hosted model request errors
- ImageError: Image reading errors
- UIError: Browser/platform interaction errors

Each exception includes:
- Descriptive message
- Optional error code for programmatic handling
- Optional context dictionary for debugging

Example:
    >>> from sweather.utils.exceptions import EmptyResponseError
    >>> raise EmptyResponseError("Failed to analyze image", operation="classify_image")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# ============================================
# Base Exception
# ============================================


class AppException(Exception):
    """
    Base exception for all Sweather application errors.

    Attributes:
        message: Human-readable error description.
        code: Optional error code for programmatic handling.
        context: Optional dictionary with debugging context.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self._default_code()
        self.context = context or {}
        super().__init__(self.message)

    def _default_code(self) -> str:
        """Generate default error code from class name."""
        # CamelCase -> UPPER_SNAKE_CASE
        name = self.__class__.__name__
        code = ""
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                code += "_"
            code += char.upper()
        return code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(AppException):
    """Base exception for configuration-related errors."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """
    Raised when a required configuration file is not found.

    Example:
        >>> raise ConfigFileNotFoundError(
        ...     "Configuration file not found",
        ...     path="/path/to/config.yaml"
        ... )
    """

    def __init__(
        self,
        message: str = "Configuration file not found",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="CONFIG_FILE_NOT_FOUND", context=context, **kwargs)


class ConfigurationError(ConfigError):
    """
    Raised when configuration is invalid or incomplete at runtime.

    Example:
        >>> raise ConfigurationError(
        ...     "Gemini API key is not set",
        ...     context={"env": "GEMINI_API_KEY"}
        ... )
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        **kwargs,
    ) -> None:
        super().__init__(message, code="CONFIG_INVALID", **kwargs)


# ============================================
# Storage Errors
# ============================================


class StorageError(AppException):
    """
    Base exception for wardrobe persistence errors.

    Raised when there are issues with:
    - Writing the key-value store (quota, disk)
    - Reading back a stored value that no longer parses
    """

    pass


class StorageQuotaExceededError(StorageError):
    """
    Raised when a write would push the store past its byte quota.

    The store is left untouched when this is raised.
    """

    def __init__(
        self,
        message: str = "Storage quota exceeded",
        key: Optional[str] = None,
        size: Optional[int] = None,
        quota: Optional[int] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
        if size is not None:
            context["size"] = size
        if quota is not None:
            context["quota"] = quota
        super().__init__(message, code="STORAGE_QUOTA_EXCEEDED", context=context, **kwargs)


class StorageCorruptError(StorageError):
    """Raised when the backing store file cannot be parsed."""

    def __init__(
        self,
        message: str = "Stored data is corrupt",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="STORAGE_CORRUPT", context=context, **kwargs)


# ============================================
# Gateway Errors
# ============================================


class GatewayError(AppException):
    """
    Base exception for hosted model request errors.

    None of these are retried; they propagate to the initiating action.
    """

    pass


class GatewayTransportError(GatewayError):
    """
    Raised when the request to the model endpoint fails.

    Example:
        >>> raise GatewayTransportError(
        ...     "Request failed",
        ...     operation="fetch_weather_text"
        ... )
    """

    def __init__(
        self,
        message: str = "Model request failed",
        operation: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        super().__init__(message, code="GATEWAY_TRANSPORT", context=context, **kwargs)


class EmptyResponseError(GatewayError):
    """Raised when the model response carries no text payload."""

    def __init__(
        self,
        message: str = "Model returned no text",
        operation: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        super().__init__(message, code="GATEWAY_EMPTY_RESPONSE", context=context, **kwargs)


class ResponseSchemaError(GatewayError):
    """
    Raised when the model payload does not match the declared shape.

    Example:
        >>> raise ResponseSchemaError(
        ...     "Payload does not match AnalysisResult",
        ...     operation="classify_image",
        ...     payload='{"name": 3}'
        ... )
    """

    def __init__(
        self,
        message: str = "Model response does not match schema",
        operation: Optional[str] = None,
        payload: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        if payload is not None:
            # Keep context small enough to log
            context["payload"] = payload[:500]
        super().__init__(message, code="GATEWAY_SCHEMA", context=context, **kwargs)


class RequestCancelledError(GatewayError):
    """Raised when a request's cancellation token fired before it finished."""

    def __init__(self, message: str = "Request cancelled", **kwargs) -> None:
        super().__init__(message, code="GATEWAY_CANCELLED", **kwargs)


# ============================================
# Image Errors
# ============================================


class ImageError(AppException):
    """Base exception for image handling errors."""

    pass


class ImageReadError(ImageError):
    """Raised when an uploaded file cannot be read."""

    def __init__(
        self,
        message: str = "Failed to read image",
        source: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if source:
            context["source"] = source
        super().__init__(message, code="IMAGE_READ", context=context, **kwargs)


# ============================================
# UI Errors
# ============================================


class UIError(AppException):
    """Base exception for browser interaction errors."""

    pass


class GeolocationError(UIError):
    """Raised when the browser denies or cannot provide a position."""

    def __init__(
        self,
        message: str = "Geolocation failed",
        reason: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if reason:
            context["reason"] = reason
        super().__init__(message, code="GEOLOCATION_FAILED", context=context, **kwargs)


__all__ = [
    "AppException",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigurationError",
    "StorageError",
    "StorageQuotaExceededError",
    "StorageCorruptError",
    "GatewayError",
    "GatewayTransportError",
    "EmptyResponseError",
    "ResponseSchemaError",
    "RequestCancelledError",
    "ImageError",
    "ImageReadError",
    "UIError",
    "GeolocationError",
]
