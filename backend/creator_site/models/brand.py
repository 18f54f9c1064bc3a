"""Brand partnership model."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime

from creator_site.database import Base


class BrandPartnership(Base):
    """A brand the creator partners with, shown as a logo strip."""

    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(100), nullable=False)
    logo_url = Column(Text, nullable=False)
    website_url = Column(Text, nullable=True)
    partnership_type = Column(String(50), nullable=True)  # 'sponsor', 'affiliate', 'collaboration'

    is_active = Column(Boolean, default=True, nullable=False, index=True)
    display_order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<BrandPartnership(id={self.id}, name='{self.name}')>"
