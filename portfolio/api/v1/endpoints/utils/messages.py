from uuid import UUID
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.errors import NotFound
from portfolio.models.messages import Message
from portfolio.models.pydantic_models.message import ContactRequest

logger = logging.getLogger(__name__)


async def create_message(db: AsyncSession, payload: ContactRequest) -> Message:
    message = Message(
        name=payload.name,
        email=str(payload.email),
        subject=payload.subject,
        message=payload.message,
    )
    db.add(message)
    await db.commit()
    logger.info("Stored contact message %s", message.message_id)
    return message


async def list_messages(db: AsyncSession) -> list[Message]:
    result = await db.execute(select(Message).order_by(Message.created_at.desc()))
    return list(result.scalars().all())


async def get_message(db: AsyncSession, message_id: UUID) -> Message:
    result = await db.execute(select(Message).where(Message.message_id == message_id))
    message = result.scalar_one_or_none()
    if message is None:
        raise NotFound("Message not found")
    return message


async def delete_message(db: AsyncSession, message_id: UUID) -> None:
    message = await get_message(db, message_id)
    await db.delete(message)
    await db.commit()
    logger.info("Deleted message %s", message_id)
