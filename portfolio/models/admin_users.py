"""
AdminUser model.

Rows are created by the bootstrap/seed entry points only; there is no
registration endpoint. ``password_hash`` never leaves the server.
"""

from sqlalchemy import Column, String, DateTime, CheckConstraint, Uuid
from portfolio.db.base import Base
from portfolio.utils import utcnow
from .enums import AdminRole
import uuid


class AdminUser(Base):
    __tablename__ = "admin_users"

    admin_id = Column(
        Uuid,
        primary_key=True,
        nullable=False,
        default=uuid.uuid4,
    )
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=AdminRole.OWNER.value)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
    last_login = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint(
            role.in_([e.value for e in AdminRole]),
            name="ck_admin_user_role",
        ),
    )
