"""
Per-entity repositories.

Each repository owns one table and offers the storage operations the
directory needs: insert returning the row, equality-filtered ordered select,
and update-by-id returning the row. Any failure inside a storage call is
rolled back, reported, and re-raised as StorageError, so the session stays
usable for the next call.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from creator_site.exceptions import DirectoryError, NotFoundError, StorageError
from creator_site.models import SocialLink, BrandPartnership, SiteContentEntry, ContactSubmission
from creator_site.services.error_tracking import capture_exception


class EntityRepository:
    """CRUD against a single entity table."""

    model = None
    kind = ""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, values: Dict[str, Any]):
        """
        Insert a row and return it with its assigned id and timestamps.

        Args:
            values: Column values, already validated and defaulted

        Returns:
            The persisted record
        """
        now = datetime.utcnow()
        record = self.model(**values, created_at=now, updated_at=now)

        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        # Driver errors such as OverflowError are not always wrapped by SQLAlchemy
        except Exception as e:
            self._fail("insert", e)

        return record

    def select(
        self,
        where: Optional[Dict[str, Any]] = None,
        order_by: Sequence = ()
    ) -> List:
        """
        Select rows matching every equality predicate in ``where``.

        Args:
            where: Column name to required value
            order_by: SQLAlchemy ordering clauses

        Returns:
            Matching records, possibly empty
        """
        try:
            query = self.db.query(self.model)
            if where:
                query = query.filter_by(**where)
            return query.order_by(*order_by).all()
        except Exception as e:
            self._fail("select", e)

    def update_by_id(self, entity_id: int, build_changes: Callable[[Any], Dict[str, Any]]):
        """
        Lock a row, compute its changes, write them and commit, as one transaction.

        Args:
            entity_id: Target id
            build_changes: Called with the locked record, returns column values to write

        Returns:
            The updated record

        Raises:
            NotFoundError: no row has this id; nothing is written
            StorageError: the database call failed; nothing is written
        """
        try:
            record = (
                self.db.query(self.model)
                .filter(self.model.id == entity_id)
                .with_for_update()
                .first()
            )

            if record is None:
                raise NotFoundError(self.kind, entity_id)

            for name, value in build_changes(record).items():
                setattr(record, name, value)

            self.db.commit()
            self.db.refresh(record)
            return record

        except DirectoryError:
            self.db.rollback()
            raise
        except Exception as e:
            self._fail("update", e)

    def _fail(self, operation: str, exc: Exception):
        self.db.rollback()
        capture_exception(exc, tags={"kind": self.kind, "operation": operation})
        raise StorageError(self.kind, operation, type(exc).__name__) from exc


class SocialLinkRepository(EntityRepository):
    model = SocialLink
    kind = "SocialLink"


class BrandRepository(EntityRepository):
    model = BrandPartnership
    kind = "BrandPartnership"


class SiteContentRepository(EntityRepository):
    model = SiteContentEntry
    kind = "SiteContentEntry"


class ContactSubmissionRepository(EntityRepository):
    model = ContactSubmission
    kind = "ContactSubmission"
