"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from creator_site.database import get_db
from creator_site.services.directory import ContentDirectory


def get_directory(db: Session = Depends(get_db)) -> ContentDirectory:
    """Content directory bound to the request's database session."""
    return ContentDirectory(db)
