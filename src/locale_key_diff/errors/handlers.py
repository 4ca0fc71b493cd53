"""
Error accumulation for a comparison run.

Errors that must not abort the run are recorded here and surfaced once the
comparison finishes.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import structlog

from .exceptions import LocaleKeyDiffError

logger = structlog.get_logger(__name__)


class ErrorContextManager:
    """
    Collects non-fatal errors raised during one run.

    Keeps the full records in order so the driver can annotate them, and
    counts them by type for the summary.
    """

    def __init__(self):
        self.error_history: List[Dict[str, Any]] = []
        self.error_counts: Dict[str, int] = {}

    def record_error(self, error: LocaleKeyDiffError, context: Optional[Dict[str, Any]] = None):
        """Record an error occurrence with context."""
        error_record = {
            "timestamp": datetime.now(timezone.utc),
            "error_type": error.__class__.__name__,
            "message": error.message,
            "error_code": error.error_code,
            "context": {**error.context, **(context or {})},
            "display": str(error),
        }

        self.error_history.append(error_record)

        error_type = error.__class__.__name__
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        logger.error(
            "Error recorded",
            error_type=error_type,
            message=error.message,
            context=error_record["context"],
            total_count=self.error_counts[error_type]
        )

    @property
    def errors(self) -> List[Dict[str, Any]]:
        return list(self.error_history)

    def has_errors(self) -> bool:
        return bool(self.error_history)

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics."""
        return {
            "total_errors": len(self.error_history),
            "error_counts": self.error_counts.copy(),
            "most_common": max(self.error_counts.items(), key=lambda x: x[1]) if self.error_counts else None,
        }
