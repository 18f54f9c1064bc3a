"""
Partial-update merge.

An update payload distinguishes three states per field:

- absent (key not sent): the stored value is kept
- present as null: the stored value is cleared (the update schemas only
  allow this on nullable columns)
- present with a value: the stored value is overwritten

Presence is read from the validated payload's ``model_fields_set``, never
from truthiness, so ``display_order=0`` and ``is_active=False`` are real
updates.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel

# Never writable through an update
IMMUTABLE_FIELDS: FrozenSet[str] = frozenset({"id", "created_at", "updated_at"})


def changed_fields(payload: BaseModel) -> Dict[str, Any]:
    """
    Compute the writable field set of an update payload.

    Null on a non-nullable field never gets here: the update schemas reject
    it during validation.

    Args:
        payload: Validated update schema instance

    Returns:
        Mapping of field name to new value, in schema declaration order
    """
    sent = payload.model_fields_set
    return {
        name: getattr(payload, name)
        for name in type(payload).model_fields
        if name in sent and name not in IMMUTABLE_FIELDS
    }


def next_updated_at(previous: Optional[datetime], now: Optional[datetime] = None) -> datetime:
    """Current UTC time, pushed one microsecond past ``previous`` if the clock has not moved."""
    now = now or datetime.utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def stamp(record, changes: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Add the refreshed ``updated_at`` to a change set for ``record``."""
    stamped = dict(changes)
    stamped["updated_at"] = next_updated_at(record.updated_at, now)
    return stamped
