"""Social media link model."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from creator_site.database import Base


class SocialLink(Base):
    """
    A link to one of the creator's platform profiles.

    Several links per platform are allowed.
    """

    __tablename__ = "social_media"

    id = Column(Integer, primary_key=True, index=True)

    platform = Column(String(50), nullable=False)  # 'twitch', 'youtube', 'tiktok', 'x', 'bluesky', ...
    username = Column(String(100), nullable=False)
    url = Column(Text, nullable=False)
    icon_url = Column(Text, nullable=True)  # Custom icon, falls back to the platform icon

    is_active = Column(Boolean, default=True, nullable=False, index=True)
    display_order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<SocialLink(id={self.id}, platform={self.platform}, username={self.username})>"
