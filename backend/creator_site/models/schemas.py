"""Pydantic schemas for request/response validation."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, StrictInt, field_validator
from typing import Optional
from datetime import datetime

from creator_site.utils.validators import validate_url, empty_to_none

# Largest value an INTEGER column holds on PostgreSQL
MAX_INT = 2_147_483_647


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    is_valid, error = validate_url(value)
    if not is_valid:
        raise ValueError(error)
    return value


def _reject_null(value):
    if value is None:
        raise ValueError("Field may be omitted but not set to null")
    return value


# ============================================
# Social Media Schemas
# ============================================

class SocialLinkCreate(BaseModel):
    """Schema for creating a social media link."""
    platform: str = Field(..., min_length=1, max_length=50)
    username: str = Field(..., min_length=1, max_length=100)
    url: str
    icon_url: Optional[str] = None
    is_active: StrictBool = True
    display_order: StrictInt = Field(0, ge=0, le=MAX_INT)

    @field_validator("url", "icon_url")
    @classmethod
    def url_shape(cls, v):
        return _check_url(v)


class SocialLinkUpdate(BaseModel):
    """Schema for updating a social media link. Omitted fields stay unchanged."""
    id: StrictInt = Field(..., le=MAX_INT)
    platform: Optional[str] = Field(None, min_length=1, max_length=50)
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    url: Optional[str] = None
    icon_url: Optional[str] = None
    is_active: Optional[StrictBool] = None
    display_order: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)

    @field_validator("platform", "username", "url", "is_active", "display_order")
    @classmethod
    def not_nullable(cls, v):
        return _reject_null(v)

    @field_validator("url", "icon_url")
    @classmethod
    def url_shape(cls, v):
        return _check_url(v)


class SocialLinkResponse(BaseModel):
    """Schema for social media link response."""
    id: int
    platform: str
    username: str
    url: str
    icon_url: Optional[str]
    is_active: bool
    display_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================
# Brand Schemas
# ============================================

class BrandCreate(BaseModel):
    """Schema for creating a brand partnership."""
    name: str = Field(..., min_length=1, max_length=100)
    logo_url: str
    website_url: Optional[str] = None
    partnership_type: Optional[str] = Field(None, max_length=50)
    is_active: StrictBool = True
    display_order: StrictInt = Field(0, ge=0, le=MAX_INT)

    @field_validator("logo_url", "website_url")
    @classmethod
    def url_shape(cls, v):
        return _check_url(v)


class BrandUpdate(BaseModel):
    """Schema for updating a brand partnership. Omitted fields stay unchanged."""
    id: StrictInt = Field(..., le=MAX_INT)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    partnership_type: Optional[str] = Field(None, max_length=50)
    is_active: Optional[StrictBool] = None
    display_order: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)

    @field_validator("name", "logo_url", "is_active", "display_order")
    @classmethod
    def not_nullable(cls, v):
        return _reject_null(v)

    @field_validator("logo_url", "website_url")
    @classmethod
    def url_shape(cls, v):
        return _check_url(v)


class BrandResponse(BaseModel):
    """Schema for brand partnership response."""
    id: int
    name: str
    logo_url: str
    website_url: Optional[str]
    partnership_type: Optional[str]
    is_active: bool
    display_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================
# Site Content Schemas
# ============================================

class SiteContentCreate(BaseModel):
    """Schema for creating a site content entry."""
    section: str = Field(..., min_length=1, max_length=50)
    key: str = Field(..., min_length=1, max_length=100)
    value: str
    content_type: str = Field("text", max_length=20)  # Not checked against the payload
    is_active: StrictBool = True


class SiteContentUpdate(BaseModel):
    """Schema for updating a site content entry. Omitted fields stay unchanged."""
    id: StrictInt = Field(..., le=MAX_INT)
    section: Optional[str] = Field(None, min_length=1, max_length=50)
    key: Optional[str] = Field(None, min_length=1, max_length=100)
    value: Optional[str] = None
    content_type: Optional[str] = Field(None, max_length=20)
    is_active: Optional[StrictBool] = None

    @field_validator("section", "key", "value", "content_type", "is_active")
    @classmethod
    def not_nullable(cls, v):
        return _reject_null(v)


class SiteContentQuery(BaseModel):
    """Optional filters for listing site content, combined with AND."""
    section: Optional[str] = None
    is_active: Optional[StrictBool] = None

    @field_validator("section", mode="before")
    @classmethod
    def empty_section_means_any(cls, v):
        return empty_to_none(v)


class SiteContentResponse(BaseModel):
    """Schema for site content response."""
    id: int
    section: str
    key: str
    value: str
    content_type: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================
# Contact Submission Schemas
# ============================================

class ContactSubmissionCreate(BaseModel):
    """
    Schema for a contact form submission.

    There is no status field; unknown keys are ignored and every submission
    starts as pending.
    """
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)
    ip_address: Optional[str] = Field(None, max_length=45)
    user_agent: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_length(cls, v):
        if len(v) > 255:
            raise ValueError("Email address must be at most 255 characters")
        return v

    @field_validator("ip_address", "user_agent", mode="before")
    @classmethod
    def empty_metadata_is_null(cls, v):
        return empty_to_none(v)


class ContactSubmissionResponse(BaseModel):
    """Schema for contact submission response."""
    id: int
    name: str
    email: str
    subject: str
    message: str
    ip_address: Optional[str]
    user_agent: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
