"""
Content section helpers. Writes are upserts that replace the whole document.
"""

from typing import Any
import logging

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.errors import DuplicateKey, NotFound, ValidationError
from portfolio.models.content_sections import ContentSection
from portfolio.models.enums import ContentKey
from portfolio.models.pydantic_models.content import content_section_adapter

logger = logging.getLogger(__name__)

CONTENT_KEYS = frozenset(k.value for k in ContentKey)


def validate_content(key: str, content: Any) -> dict[str, Any]:
    """Validate *content* against the record type for *key*.

    Returns the normalised document (defaults filled, extra fields kept).
    """
    if key not in CONTENT_KEYS:
        raise ValidationError(
            f"Unknown content key '{key}'",
            errors=[f"key: must be one of {', '.join(sorted(CONTENT_KEYS))}"],
        )
    if not isinstance(content, dict):
        raise ValidationError("Content must be a JSON object", errors=["content"])
    try:
        section = content_section_adapter.validate_python(
            {"key": key, "content": content}
        )
    except PydanticValidationError as e:
        errors = [
            ".".join(str(p) for p in err["loc"][2:]) + f": {err['msg']}"
            for err in e.errors()
        ]
        raise ValidationError(f"Invalid content for '{key}'", errors=errors)
    return section.content.model_dump(mode="json")


async def list_sections(db: AsyncSession) -> list[ContentSection]:
    result = await db.execute(select(ContentSection).order_by(ContentSection.key))
    return list(result.scalars().all())


async def get_section(db: AsyncSession, key: str) -> ContentSection:
    result = await db.execute(select(ContentSection).where(ContentSection.key == key))
    section = result.scalar_one_or_none()
    if section is None:
        raise NotFound(f"Content section '{key}' not found")
    return section


async def upsert_section(db: AsyncSession, key: str, content: Any) -> ContentSection:
    document = validate_content(key, content)

    result = await db.execute(select(ContentSection).where(ContentSection.key == key))
    section = result.scalar_one_or_none()
    if section is None:
        section = ContentSection(key=key, content=document)
        db.add(section)
    else:
        section.content = document

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateKey(f"Content section '{key}' was created concurrently, retry")

    logger.info("Saved content section '%s'", key)
    return section
