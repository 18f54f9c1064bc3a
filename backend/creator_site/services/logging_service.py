"""Structured logging and in-process operation metrics."""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
import traceback

from creator_site.config import settings


class StructuredLogger:
    """
    Structured JSON logger.

    Outputs one JSON object per line for log aggregation systems.
    """

    def __init__(self, name: str, level: str = "INFO"):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Minimum level name
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.logger.propagate = False

        if not self.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter('%(message)s'))
            self.logger.addHandler(console_handler)

    def _format_log(
        self,
        level: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Format log message as JSON.

        Args:
            level: Log level
            message: Log message
            extra: Additional context

        Returns:
            JSON-formatted log string
        """
        log_entry = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": level,
            "message": message,
            "logger": self.logger.name
        }

        if extra:
            log_entry.update(extra)

        return json.dumps(log_entry, default=str)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.logger.info(self._format_log("INFO", message, kwargs))

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.logger.warning(self._format_log("WARNING", message, kwargs))

    def error(self, message: str, **kwargs):
        """Log error message."""
        self.logger.error(self._format_log("ERROR", message, kwargs))

    def exception(self, message: str, error: BaseException, **kwargs):
        """
        Log exception with traceback.

        Args:
            message: Error message
            error: Exception whose traceback is attached
            **kwargs: Additional context
        """
        kwargs["traceback"] = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )

        self.logger.error(self._format_log("ERROR", message, kwargs))


class ApplicationMetrics:
    """
    Track directory operation counts for monitoring.

    Stores metrics in memory for the health endpoints.
    """

    def __init__(self):
        """Initialize metrics tracker."""
        self.start_time = datetime.utcnow()
        self.reset()

    def reset(self):
        """Zero every counter."""
        self.metrics = {
            "operations": {
                "total": 0,
                "success": 0,
                "error": 0,
                "by_operation": {}
            },
            "uptime_seconds": 0,
            "last_updated": datetime.utcnow().isoformat()
        }

    def record_operation(self, kind: str, operation: str, success: bool = True):
        """
        Increment operation counters.

        Args:
            kind: Entity kind, e.g. "SocialLink"
            operation: Operation name, e.g. "create"
            success: Whether the operation returned normally
        """
        counters = self.metrics["operations"]
        counters["total"] += 1
        outcome = "success" if success else "error"
        counters[outcome] += 1

        name = f"{kind}.{operation}"
        if name not in counters["by_operation"]:
            counters["by_operation"][name] = {"total": 0, "success": 0, "error": 0}

        counters["by_operation"][name]["total"] += 1
        counters["by_operation"][name][outcome] += 1

        self._update_timestamp()

    def _update_timestamp(self):
        """Update last_updated timestamp and uptime."""
        self.metrics["last_updated"] = datetime.utcnow().isoformat()
        self.metrics["uptime_seconds"] = (datetime.utcnow() - self.start_time).total_seconds()

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get current metrics.

        Returns:
            Metrics dictionary
        """
        self._update_timestamp()
        return self.metrics

    def get_error_rate(self) -> float:
        """
        Calculate operation error rate.

        Returns:
            Error rate percentage
        """
        total = self.metrics["operations"]["total"]
        if total == 0:
            return 0.0

        return (self.metrics["operations"]["error"] / total) * 100


# Global instances
logger = StructuredLogger("creator-site", level=settings.LOG_LEVEL)
app_metrics = ApplicationMetrics()
