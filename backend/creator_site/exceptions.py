"""
Directory error taxonomy.

Every directory operation either returns a result or raises exactly one of
ValidationError, NotFoundError or StorageError.
"""

from typing import Any, Dict, List, Optional


class DirectoryError(Exception):
    """Base exception for all content directory errors."""

    error_type = "directory_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for an error response body."""
        return {"detail": self.message, "error_type": self.error_type, **self.details}


class ValidationError(DirectoryError):
    """Input failed a declared constraint. Raised before any storage access."""

    error_type = "validation_error"

    def __init__(self, errors: List[Dict[str, str]], kind: Optional[str] = None):
        self.errors = errors
        self.kind = kind
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        message = f"Invalid {kind} input: {summary}" if kind else f"Invalid input: {summary}"
        super().__init__(message, {"errors": errors})

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields."""
        return [e["field"] for e in self.errors]


class NotFoundError(DirectoryError):
    """An update targeted an id with no stored record."""

    error_type = "not_found"

    def __init__(self, kind: str, entity_id: int):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(
            f"{kind} with id {entity_id} not found",
            {"kind": kind, "id": entity_id}
        )


class StorageError(DirectoryError):
    """The underlying storage call failed. Never retried by the directory."""

    error_type = "storage_error"

    def __init__(self, kind: str, operation: str, reason: str = ""):
        self.kind = kind
        self.operation = operation
        message = f"Storage failure during {kind} {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"kind": kind, "operation": operation})
