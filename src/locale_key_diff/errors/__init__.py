"""
Error handling for locale_key_diff.

- Structured error hierarchy
- Accumulation of non-fatal errors across a run
- Logging decorators
"""

from .exceptions import (
    LocaleKeyDiffError,
    PermanentError,
    ConfigurationError,
    DirectoryAccessError,
    FileReadError,
    ParseError,
    categorize_error,
)

from .handlers import (
    ErrorContextManager,
)

from .decorators import (
    log_errors,
)

__all__ = [
    # Exceptions
    "LocaleKeyDiffError",
    "PermanentError",
    "ConfigurationError",
    "DirectoryAccessError",
    "FileReadError",
    "ParseError",
    "categorize_error",

    # Handlers
    "ErrorContextManager",

    # Decorators
    "log_errors",
]
