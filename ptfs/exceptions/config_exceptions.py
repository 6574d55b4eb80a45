"""
Configuration Exceptions

Exceptions related to loading and validating ptfs configuration.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ConfigurationError(Exception):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        source: Configuration file or key that caused the error
        context: Additional context about the error

    Example:
        >>> raise ConfigurationError("Configuration file not found", source="ptfs.json")
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.source = source
        self.context = dict(context or {})
        if source:
            self.context["source"] = source

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"source={self.source!r})"
        )


class ConfigValidationError(ConfigurationError):
    """A configuration key is unknown or its value is out of range."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=1001, source=key, context=context)
        self.key = key
