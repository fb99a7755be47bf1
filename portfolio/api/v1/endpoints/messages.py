from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.endpoints.utils import messages as message_utils
from portfolio.api.v1.helpers.responses import APIResponse, success_response
from portfolio.db.session import get_db
from portfolio.models.pydantic_models.message import ContactRequest, MessageModel

public_router = APIRouter()
admin_router = APIRouter()


@public_router.post("", response_model=MessageModel, status_code=status.HTTP_201_CREATED)
async def submit_contact(payload: ContactRequest, db: AsyncSession = Depends(get_db)):
    """Public contact form submission."""
    return await message_utils.create_message(db, payload)


@admin_router.get("", response_model=List[MessageModel])
async def list_messages(db: AsyncSession = Depends(get_db)):
    """All messages, newest first."""
    return await message_utils.list_messages(db)


@admin_router.get("/{message_id}", response_model=MessageModel)
async def get_message(message_id: UUID, db: AsyncSession = Depends(get_db)):
    return await message_utils.get_message(db, message_id)


@admin_router.delete("/{message_id}", response_model=APIResponse)
async def delete_message(message_id: UUID, db: AsyncSession = Depends(get_db)):
    await message_utils.delete_message(db, message_id)
    return success_response(message="Message deleted")
