"""
Contact Submission Model

Append-only log of messages sent through the public contact form.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
import enum

from creator_site.database import Base


class SubmissionStatus(str, enum.Enum):
    """Known submission statuses. The column itself accepts any tag."""
    PENDING = "pending"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class ContactSubmission(Base):
    """A visitor message from the contact form."""

    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)

    # Request metadata, supplied by the transport
    ip_address = Column(String(45), nullable=True)  # IPv6 max length
    user_agent = Column(Text, nullable=True)

    status = Column(String(20), default=SubmissionStatus.PENDING.value, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<ContactSubmission(id={self.id}, email={self.email}, status={self.status})>"
