from sqlalchemy import (
    Column,
    String,
    Text,
    Boolean,
    Integer,
    DateTime,
    JSON,
    UniqueConstraint,
    Uuid,
)
from portfolio.db.base import Base
from portfolio.utils import utcnow
import uuid


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(
        Uuid,
        primary_key=True,
        nullable=False,
        default=uuid.uuid4,
    )
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    short_description = Column(String, nullable=False)
    detailed_description = Column(Text, nullable=True)
    tech_stack = Column(JSON, nullable=False, default=list)
    category = Column(String, nullable=True)
    cover_image_url = Column(String, nullable=True)
    github_url = Column(String, nullable=True)
    live_url = Column(String, nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    readme_content = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (UniqueConstraint("slug", name="uq_project_slug"),)
