"""Social media link endpoints."""

from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List

from creator_site.models.schemas import SocialLinkResponse
from creator_site.routers.deps import get_directory
from creator_site.services.directory import ContentDirectory

router = APIRouter()


@router.get("", response_model=List[SocialLinkResponse])
def list_social_media(directory: ContentDirectory = Depends(get_directory)):
    """Active social links, ordered for display."""
    return directory.social_media.list_active()


@router.post("", response_model=SocialLinkResponse, status_code=status.HTTP_201_CREATED)
def create_social_media(
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """
    Add a social link.

    Omitted ``is_active`` and ``display_order`` default to true and 0.
    """
    return directory.social_media.create(payload)


@router.put("/{link_id}", response_model=SocialLinkResponse)
def update_social_media(
    link_id: int,
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """
    Partially update a social link.

    Only keys present in the body are written; ``icon_url: null`` clears the icon.
    """
    return directory.social_media.update({**payload, "id": link_id})
