"""ConfigScout Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the ConfigScout system. These
exceptions separate failures that abort an operation (filesystem errors,
invalid arguments) from failures that are recovered locally (load errors).
"""

from typing import Optional, Any, Dict


class ConfigScoutError(Exception):
    """Base exception for all ConfigScout-specific errors.

    This is the root exception class that all other ConfigScout exceptions
    inherit from. It carries a message, optional context and the underlying
    cause.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize ConfigScout error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., paths, loader names)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "ConfigScoutError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(ConfigScoutError):
    """Raised when an argument does not have the expected shape or type.

    Used for the options accepted by the cosmic search. Never recovered.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the argument that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class FilesystemError(ConfigScoutError):
    """Raised when a directory cannot be opened or read.

    Walks, listers and presence probes let this propagate; the whole
    operation is aborted.
    """

    def __init__(
        self,
        path: str,
        operation: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize filesystem error.

        Args:
            path: Path that could not be accessed
            operation: Operation that failed (e.g., "open", "read")
            reason: Description of what went wrong
            context: Optional additional context
            cause: Underlying OSError
        """
        message = f"Filesystem {operation} failed for {path}: {reason}"
        super().__init__(message, context, cause)
        self.path = path
        self.operation = operation
        self.reason = reason


class LoadError(ConfigScoutError):
    """Raised by a loader strategy when a file cannot be loaded.

    The candidate resolver recovers from this: the failure becomes a warning
    and the resolution returns None.
    """

    def __init__(
        self,
        path: str,
        loader: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize load error.

        Args:
            path: File that failed to load
            loader: Name of the loader strategy
            reason: Description of what went wrong
            context: Optional additional context
            cause: Underlying exception
        """
        message = f"{loader} load failed: {reason}"
        super().__init__(message, context, cause)
        self.path = path
        self.loader = loader
        self.reason = reason
