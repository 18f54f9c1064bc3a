"""Brand partnership endpoints."""

from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List

from creator_site.models.schemas import BrandResponse
from creator_site.routers.deps import get_directory
from creator_site.services.directory import ContentDirectory

router = APIRouter()


@router.get("", response_model=List[BrandResponse])
def list_brands(directory: ContentDirectory = Depends(get_directory)):
    """Active brand partnerships, ordered for display."""
    return directory.brands.list_active()


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """Add a brand partnership."""
    return directory.brands.create(payload)


@router.put("/{brand_id}", response_model=BrandResponse)
def update_brand(
    brand_id: int,
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """
    Partially update a brand partnership.

    ``website_url`` and ``partnership_type`` may be sent as null to clear them.
    """
    return directory.brands.update({**payload, "id": brand_id})
