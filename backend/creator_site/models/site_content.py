"""Keyed site content model."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from creator_site.database import Base


class SiteContentEntry(Base):
    """
    Free-form content value addressed by (section, key).

    The pair is not unique; callers keep the id returned at creation.
    """

    __tablename__ = "site_content"

    id = Column(Integer, primary_key=True, index=True)

    section = Column(String(50), nullable=False, index=True)  # 'hero', 'about', 'merch', ...
    key = Column(String(100), nullable=False)
    value = Column(Text, nullable=False)
    content_type = Column(String(20), default="text", nullable=False)  # 'text', 'html', 'url', 'json'

    is_active = Column(Boolean, default=True, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<SiteContentEntry(id={self.id}, section={self.section}, key={self.key})>"
