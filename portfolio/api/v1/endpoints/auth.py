"""
Admin auth – login, profile, password change.

No signup: the single owner account comes from the bootstrap/seed step.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.helpers.authentication import (
    get_current_admin,
    hash_password,
    issue_token,
    verify_password,
)
from portfolio.api.v1.helpers.responses import APIResponse, success_response
from portfolio.core.errors import InvalidCredentials
from portfolio.db.session import get_db
from portfolio.models.admin_users import AdminUser
from portfolio.models.pydantic_models.admin import (
    AdminModel,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
)
from portfolio.utils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Authenticate with email + password and receive a JWT."""
    access_token, admin = await issue_token(request.email, request.password, db)

    admin.last_login = utcnow()
    await db.commit()

    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        admin=AdminModel.model_validate(admin),
    )


@router.get("/me", response_model=AdminModel)
async def get_me(current_admin: AdminUser = Depends(get_current_admin)):
    return AdminModel.model_validate(current_admin)


@router.put("/me/password", response_model=APIResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_admin: AdminUser = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    """Change the current admin's password. Issued tokens stay valid until expiry."""
    if not verify_password(request.current_password, current_admin.password_hash):
        raise InvalidCredentials("Current password is incorrect")

    current_admin.password_hash = hash_password(request.new_password)
    await db.commit()
    logger.info("Password changed for admin %s", current_admin.admin_id)

    return success_response(message="Password changed successfully")
