"""API routers."""

from creator_site.routers import health, social_media, brands, site_content, contact

__all__ = ["health", "social_media", "brands", "site_content", "contact"]
