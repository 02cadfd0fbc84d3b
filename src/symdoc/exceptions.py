"""Custom exceptions for symdoc with context support.

The extraction core never raises these; they guard the surfaces around it
(identity resolution, configuration, the CLI).
"""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """
    Generate an 8-character UUID-based correlation ID.

    Returns:
        8-character correlation ID string.
    """
    return str(uuid.uuid4())[:8]


class SymdocError(Exception):
    """Base exception for symdoc with context and correlation ID support."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise exception with message, correlation ID, and context.

        Args:
            message: Error message.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ValidationError(SymdocError):
    """Raised when a symbol identity cannot be built from its inputs."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise validation error with field and value context.

        Args:
            message: Error message.
            field: Optional field name that failed validation.
            value: Optional value that failed validation.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)
        super().__init__(message, correlation_id=correlation_id, context=context)


class ConfigurationError(SymdocError):
    """Raised when environment configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise configuration error with the offending setting name.

        Args:
            message: Error message.
            setting: Optional environment variable that failed validation.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if setting is not None:
            context["setting"] = setting
        super().__init__(message, correlation_id=correlation_id, context=context)
