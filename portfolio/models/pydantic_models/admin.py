"""
Admin-facing models. None of them carry the password digest.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from portfolio.models.enums import AdminRole


class AdminModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    admin_id: UUID
    email: str
    role: AdminRole
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class AdminIdentity(BaseModel):
    """Identity decoded from a verified access token."""

    admin_id: UUID
    email: str
    role: AdminRole


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    admin: AdminModel


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)
