"""
ContentSection model: one row per content key, ``content`` holds the whole
document for that key and is replaced wholesale on every write.
"""

from sqlalchemy import Column, String, DateTime, JSON, UniqueConstraint, Uuid
from portfolio.db.base import Base
from portfolio.utils import utcnow
import uuid


class ContentSection(Base):
    __tablename__ = "content_sections"

    section_id = Column(
        Uuid,
        primary_key=True,
        nullable=False,
        default=uuid.uuid4,
    )
    key = Column(String, nullable=False, index=True)
    content = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (UniqueConstraint("key", name="uq_content_section_key"),)
