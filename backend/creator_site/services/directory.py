"""
Content directory facade.

Composes validation, merge, projection and the repositories into the public
operations for each entity kind. The four directories share a session but
never touch each other's tables.
"""

from contextlib import contextmanager
from typing import Any, List, Mapping, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from creator_site.exceptions import DirectoryError, NotFoundError
from creator_site.models import SubmissionStatus
from creator_site.models.schemas import (
    SocialLinkCreate,
    SocialLinkUpdate,
    SocialLinkResponse,
    BrandCreate,
    BrandUpdate,
    BrandResponse,
    SiteContentCreate,
    SiteContentUpdate,
    SiteContentQuery,
    SiteContentResponse,
    ContactSubmissionCreate,
    ContactSubmissionResponse,
)
from creator_site.services import merge, projection
from creator_site.services.logging_service import logger, app_metrics
from creator_site.services.repositories import (
    SocialLinkRepository,
    BrandRepository,
    SiteContentRepository,
    ContactSubmissionRepository,
)
from creator_site.services.validation import validate

Payload = Union[Mapping[str, Any], BaseModel, None]


@contextmanager
def tracked(kind: str, operation: str):
    """Count an operation's outcome and log rejected calls."""
    try:
        yield
    except DirectoryError as exc:
        app_metrics.record_operation(kind, operation, success=False)
        if isinstance(exc, NotFoundError):
            logger.warning(exc.message, kind=kind, operation=operation, id=exc.entity_id)
        else:
            logger.info(f"{kind} {operation} rejected", kind=kind, error_type=exc.error_type)
        raise
    app_metrics.record_operation(kind, operation, success=True)


class EntityDirectory:
    """Create and partial update for one entity kind."""

    repository_class = None
    create_schema = None
    update_schema = None
    response_schema = None

    def __init__(self, db: Session):
        self.repository = self.repository_class(db)
        self.kind = self.repository.kind

    def create(self, data: Payload):
        """
        Validate, apply create-time defaults and insert.

        Args:
            data: Create payload

        Returns:
            The created entity
        """
        with tracked(self.kind, "create"):
            payload = validate(self.create_schema, data, self.kind)
            record = self.repository.insert(payload.model_dump())
            logger.info(f"{self.kind} created", kind=self.kind, id=record.id)
            return self.response_schema.model_validate(record)

    def update(self, data: Payload):
        """
        Apply a sparse update to an existing entity.

        Fields absent from ``data`` are left untouched, nullable fields sent as
        null are cleared, and ``updated_at`` is always refreshed.

        Args:
            data: Update payload including ``id``

        Returns:
            The updated entity

        Raises:
            ValidationError: invalid payload, nothing is read or written
            NotFoundError: no entity has this id, nothing is written
        """
        with tracked(self.kind, "update"):
            payload = validate(self.update_schema, data, self.kind)
            changes = merge.changed_fields(payload)
            record = self.repository.update_by_id(
                payload.id,
                lambda current: merge.stamp(current, changes)
            )
            logger.info(
                f"{self.kind} updated",
                kind=self.kind,
                id=record.id,
                fields=sorted(changes)
            )
            return self.response_schema.model_validate(record)

    def _project(self, list_filter: projection.ListFilter, ordering) -> List:
        records = self.repository.select(list_filter.predicates(), ordering)
        return [self.response_schema.model_validate(r) for r in records]


class SocialLinkDirectory(EntityDirectory):
    repository_class = SocialLinkRepository
    create_schema = SocialLinkCreate
    update_schema = SocialLinkUpdate
    response_schema = SocialLinkResponse

    def list_active(self) -> List[SocialLinkResponse]:
        """Active links in display order."""
        with tracked(self.kind, "list_active"):
            model = self.repository.model
            return self._project(projection.ACTIVE_ONLY, projection.display_ordering(model))


class BrandDirectory(EntityDirectory):
    repository_class = BrandRepository
    create_schema = BrandCreate
    update_schema = BrandUpdate
    response_schema = BrandResponse

    def list_active(self) -> List[BrandResponse]:
        """Active brand partnerships in display order."""
        with tracked(self.kind, "list_active"):
            model = self.repository.model
            return self._project(projection.ACTIVE_ONLY, projection.display_ordering(model))


class SiteContentDirectory(EntityDirectory):
    repository_class = SiteContentRepository
    create_schema = SiteContentCreate
    update_schema = SiteContentUpdate
    response_schema = SiteContentResponse

    def list_active(self, filters: Payload = None) -> List[SiteContentResponse]:
        """
        Site content matching every supplied filter.

        With no filters the whole table is returned, inactive rows included.
        A filter that matches nothing yields an empty list.
        """
        with tracked(self.kind, "list_active"):
            query = validate(SiteContentQuery, filters, self.kind)
            list_filter = projection.ListFilter(section=query.section, is_active=query.is_active)
            model = self.repository.model
            return self._project(list_filter, projection.display_ordering(model))


class ContactSubmissionDirectory:
    """Append-only contact log: create and list, no update."""

    def __init__(self, db: Session):
        self.repository = ContactSubmissionRepository(db)
        self.kind = self.repository.kind

    def create(self, data: Payload) -> ContactSubmissionResponse:
        """Record a submission. Status always starts as pending."""
        with tracked(self.kind, "create"):
            payload = validate(ContactSubmissionCreate, data, self.kind)
            values = payload.model_dump()
            values["status"] = SubmissionStatus.PENDING.value
            record = self.repository.insert(values)
            logger.info(f"{self.kind} created", kind=self.kind, id=record.id)
            return ContactSubmissionResponse.model_validate(record)

    def list_all(self) -> List[ContactSubmissionResponse]:
        """Every submission, most recent first."""
        with tracked(self.kind, "list_all"):
            model = self.repository.model
            records = self.repository.select(None, projection.newest_first(model))
            return [ContactSubmissionResponse.model_validate(r) for r in records]


class ContentDirectory:
    """Entry point bundling the four independent directories over one session."""

    def __init__(self, db: Session):
        self.db = db
        self.social_media = SocialLinkDirectory(db)
        self.brands = BrandDirectory(db)
        self.site_content = SiteContentDirectory(db)
        self.contact_submissions = ContactSubmissionDirectory(db)
