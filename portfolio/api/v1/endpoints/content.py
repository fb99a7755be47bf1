from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.endpoints.utils import content as content_utils
from portfolio.core.errors import NotFound
from portfolio.db.session import get_db
from portfolio.models.pydantic_models.content import ContentSectionModel

public_router = APIRouter()
admin_router = APIRouter()


@public_router.get("", response_model=Dict[str, Dict[str, Any]])
async def get_all_content(db: AsyncSession = Depends(get_db)):
    """Every stored section as a ``key -> content`` map."""
    sections = await content_utils.list_sections(db)
    return {s.key: s.content for s in sections}


@public_router.get("/{key}", response_model=Dict[str, Any])
async def get_content(key: str, db: AsyncSession = Depends(get_db)):
    if key not in content_utils.CONTENT_KEYS:
        raise NotFound(f"Content section '{key}' not found")
    section = await content_utils.get_section(db, key)
    return section.content


@admin_router.get("", response_model=List[ContentSectionModel])
async def admin_list_content(db: AsyncSession = Depends(get_db)):
    return await content_utils.list_sections(db)


@admin_router.get("/{key}", response_model=ContentSectionModel)
async def admin_get_content(key: str, db: AsyncSession = Depends(get_db)):
    if key not in content_utils.CONTENT_KEYS:
        raise NotFound(f"Content section '{key}' not found")
    return await content_utils.get_section(db, key)


@admin_router.put("/{key}", response_model=ContentSectionModel)
async def put_content(
    key: str,
    content: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Replace the whole document for *key*, creating the section on first write."""
    return await content_utils.upsert_section(db, key, content)
