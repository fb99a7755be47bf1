from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: Optional[str] = Field(None, max_length=300)
    message: str = Field(..., min_length=1, max_length=5000)


class MessageModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    message_id: UUID
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    created_at: Optional[datetime] = None
