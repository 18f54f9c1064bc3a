"""Site content endpoints."""

from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, List, Optional

from creator_site.models.schemas import SiteContentResponse
from creator_site.routers.deps import get_directory
from creator_site.services.directory import ContentDirectory

router = APIRouter()


@router.get("", response_model=List[SiteContentResponse])
def list_site_content(
    section: Optional[str] = Query(None, description="Exact section match, e.g. 'hero'"),
    is_active: Optional[bool] = Query(None, description="Exact activity match"),
    directory: ContentDirectory = Depends(get_directory)
):
    """
    List site content.

    Both filters are optional and combined with AND; with neither, every
    entry is returned.
    """
    filters = {}
    if section is not None:
        filters["section"] = section
    if is_active is not None:
        filters["is_active"] = is_active

    return directory.site_content.list_active(filters)


@router.post("", response_model=SiteContentResponse, status_code=status.HTTP_201_CREATED)
def create_site_content(
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """Add a site content entry. ``(section, key)`` is not required to be unique."""
    return directory.site_content.create(payload)


@router.put("/{content_id}", response_model=SiteContentResponse)
def update_site_content(
    content_id: int,
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """Partially update a site content entry."""
    return directory.site_content.update({**payload, "id": content_id})
