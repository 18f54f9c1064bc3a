"""Database models."""

from creator_site.models.social_media import SocialLink
from creator_site.models.brand import BrandPartnership
from creator_site.models.site_content import SiteContentEntry
from creator_site.models.contact_submission import ContactSubmission, SubmissionStatus

__all__ = ["SocialLink", "BrandPartnership", "SiteContentEntry", "ContactSubmission", "SubmissionStatus"]
