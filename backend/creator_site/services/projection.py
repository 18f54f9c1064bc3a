"""
Active/ordered projection for list operations.

Filters are a small fixed struct translated into a conjunction of equality
predicates; ordering is fixed per entity kind and always ends on the
primary key so equal sort values keep insertion order.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ListFilter:
    """Optional equality filters, combined with AND. None means unfiltered."""

    section: Optional[str] = None
    is_active: Optional[bool] = None

    def predicates(self) -> Dict[str, Any]:
        """Equality predicates for the storage query."""
        where: Dict[str, Any] = {}
        if self.section is not None:
            where["section"] = self.section
        if self.is_active is not None:
            where["is_active"] = self.is_active
        return where


ACTIVE_ONLY = ListFilter(is_active=True)


def display_ordering(model) -> Tuple:
    """Ascending display_order, ties broken by insertion order."""
    if hasattr(model, "display_order"):
        return (model.display_order.asc(), model.id.asc())
    return (model.id.asc(),)


def newest_first(model) -> Tuple:
    """Most recent first, ties broken by latest insert."""
    return (model.created_at.desc(), model.id.desc())
