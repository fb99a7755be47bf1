from sqlalchemy import Column, String, Text, DateTime, Uuid
from portfolio.db.base import Base
from portfolio.utils import utcnow
import uuid


class Message(Base):
    __tablename__ = "messages"

    message_id = Column(
        Uuid,
        primary_key=True,
        nullable=False,
        default=uuid.uuid4,
    )
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=True)
    message = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
