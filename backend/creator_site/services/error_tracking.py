"""
Error Tracking Service

Forwards storage failures and unhandled errors to Sentry when a DSN is
configured. Always logs locally.
"""

from typing import Optional, Dict, Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from creator_site.config import settings
from creator_site.services.logging_service import logger

# Caller mistakes, not service faults
_IGNORED_ERROR_TYPES = ("ValidationError", "NotFoundError", "RequestValidationError")


class ErrorTracker:
    """Centralized error tracking."""

    def __init__(self, dsn: str = ""):
        """Initialize error tracking."""
        self.sentry_enabled = False

        if dsn:
            self._initialize_sentry(dsn)

    def _initialize_sentry(self, dsn: str):
        """Initialize Sentry SDK."""
        try:
            sentry_sdk.init(
                dsn=dsn,
                environment=settings.ENVIRONMENT,
                release=settings.APP_VERSION,
                traces_sample_rate=0.1,  # 10% of transactions
                integrations=[
                    FastApiIntegration(),
                    SqlalchemyIntegration()
                ],
                before_send=self._filter_before_send,
                attach_stacktrace=True,
                send_default_pii=False  # Contact submissions carry visitor emails and IPs
            )

            self.sentry_enabled = True
            logger.info(
                "Sentry error tracking enabled",
                environment=settings.ENVIRONMENT,
                release=settings.APP_VERSION
            )

        except Exception as e:
            logger.error(f"Failed to initialize Sentry: {e}")

    def _filter_before_send(self, event: Dict[str, Any], hint: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Filter events before sending to Sentry.

        Returns None to drop the event, or the event to send it.
        """
        if 'request' in event:
            url = event['request'].get('url', '')
            if '/health' in url:
                return None

        if 'exception' in event:
            for exception in event['exception'].get('values', []):
                if exception.get('type', '') in _IGNORED_ERROR_TYPES:
                    return None

        return event

    def capture_exception(
        self,
        exception: Exception,
        tags: Optional[Dict[str, str]] = None
    ):
        """
        Capture an exception.

        Args:
            exception: The exception to capture
            tags: Custom tags for filtering
        """
        logger.exception(
            f"Exception captured: {exception}",
            exception,
            error_type=type(exception).__name__,
            **(tags or {})
        )

        if self.sentry_enabled:
            with sentry_sdk.new_scope() as scope:
                for key, value in (tags or {}).items():
                    scope.set_tag(key, value)

                sentry_sdk.capture_exception(exception)


# Global instance
error_tracker = ErrorTracker(settings.SENTRY_DSN)


def capture_exception(exception: Exception, **kwargs):
    """Capture an exception."""
    error_tracker.capture_exception(exception, **kwargs)
