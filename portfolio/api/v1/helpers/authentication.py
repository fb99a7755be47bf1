"""
Admin authentication: password digests, access-token issue/verify, and the
``get_current_admin`` dependency guarding every admin route.

There is a single privileged role (``owner``). The role travels in the token
so it can be branched on later, but nothing checks it today.
"""

from datetime import timedelta, datetime, timezone
from uuid import UUID
import logging

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.config import settings
from portfolio.core.errors import InvalidCredentials, InvalidToken, TokenExpired
from portfolio.db.session import get_db
from portfolio.models.admin_users import AdminUser
from portfolio.models.enums import AdminRole
from portfolio.models.pydantic_models.admin import AdminIdentity

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
bearer_scheme = HTTPBearer(auto_error=False)

# Checked against when the email is unknown so both failure paths cost one bcrypt round.
_DUMMY_HASH = bcrypt.hashpw(b"portfolio-dummy-password", bcrypt.gensalt()).decode(
    "utf-8"
)


def hash_password(plain_password: str) -> str:
    return bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt()).decode(
        "utf-8"
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # malformed stored digest
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


async def authenticate_admin(email: str, password: str, db: AsyncSession) -> AdminUser:
    """Return the admin for *email* / *password* or raise ``InvalidCredentials``.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    result = await db.execute(
        select(AdminUser).where(AdminUser.email == email.strip().lower())
    )
    admin = result.scalar_one_or_none()

    if admin is None:
        verify_password(password, _DUMMY_HASH)
        logger.info("Login rejected: unknown admin email")
        raise InvalidCredentials()

    if not verify_password(password, admin.password_hash):
        logger.info("Login rejected: bad password for admin %s", admin.admin_id)
        raise InvalidCredentials()

    return admin


def token_for(admin: AdminUser, expires_delta: timedelta | None = None) -> str:
    return create_access_token(
        data={"sub": str(admin.admin_id), "email": admin.email, "role": admin.role},
        expires_delta=expires_delta,
    )


async def issue_token(email: str, password: str, db: AsyncSession) -> tuple[str, AdminUser]:
    admin = await authenticate_admin(email, password, db)
    return token_for(admin), admin


def verify_token(token: str) -> AdminIdentity:
    """Decode a bearer token into the admin identity it was issued for."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError:
        raise InvalidToken()

    sub = payload.get("sub")
    email = payload.get("email")
    role = payload.get("role")
    if not sub or not email or not role:
        raise InvalidToken("Token is missing required claims")

    try:
        return AdminIdentity(admin_id=UUID(sub), email=email, role=AdminRole(role))
    except ValueError:
        raise InvalidToken("Token carries malformed claims")


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> AdminUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidToken("Authentication required")

    identity = verify_token(credentials.credentials)

    result = await db.execute(
        select(AdminUser).where(AdminUser.admin_id == identity.admin_id)
    )
    admin = result.scalar_one_or_none()
    if admin is None:
        raise InvalidToken("Admin account no longer exists")
    return admin
