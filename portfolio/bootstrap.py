"""
Bootstrap – provision the owner admin account on first startup when no admin
exists yet. Credentials come from ``ADMIN_DEFAULT_EMAIL`` /
``ADMIN_DEFAULT_PASSWORD``.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.helpers.authentication import hash_password
from portfolio.config import settings
from portfolio.models.admin_users import AdminUser
from portfolio.models.enums import AdminRole

logger = logging.getLogger(__name__)


async def ensure_default_admin(db: AsyncSession) -> AdminUser | None:
    """Create the owner account if the admin table is empty.

    Returns the new admin, or None when one already existed.
    """
    result = await db.execute(select(AdminUser).limit(1))
    if result.scalar_one_or_none() is not None:
        return None  # already provisioned

    admin = AdminUser(
        email=settings.admin_default_email.strip().lower(),
        password_hash=hash_password(settings.admin_default_password),
        role=AdminRole.OWNER.value,
    )
    db.add(admin)
    await db.commit()

    logger.info(
        "=== FIRST RUN: provisioned owner admin %s ===\n"
        "Change the default password after first login.",
        admin.email,
    )
    return admin
