"""
Error hierarchy for locale_key_diff.

Every failure the checker can hit is classified here so callers can decide
whether it is fatal (configuration) or local to one root or one file.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class LocaleKeyDiffError(Exception):
    """
    Base exception for all locale_key_diff errors.

    Carries a machine-readable error code and a context dict so that errors
    can be logged with structure and surfaced in reports.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }

    def is_fatal(self) -> bool:
        """Only configuration problems stop a run."""
        return isinstance(self, ConfigurationError)


class PermanentError(LocaleKeyDiffError):
    """Base class for errors that re-running will not fix."""
    pass


class ConfigurationError(PermanentError):
    """Malformed or missing configuration input."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class DirectoryAccessError(PermanentError):
    """A shared-folder locale root could not be listed."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path}, **kwargs)


class FileReadError(PermanentError):
    """A translation file could not be read."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path}, **kwargs)


class ParseError(PermanentError):
    """A translation file is not a JSON object."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **kwargs
    ):
        super().__init__(
            message,
            context={"path": path, "line": line, "column": column},
            **kwargs
        )


def categorize_error(error: Exception) -> str:
    """Sort an error into configuration, filesystem, parse or unknown."""
    if isinstance(error, ConfigurationError):
        return "configuration"
    if isinstance(error, (DirectoryAccessError, FileReadError, OSError)):
        return "filesystem"
    if isinstance(error, (ParseError, ValueError)):
        return "parse"
    return "unknown"
