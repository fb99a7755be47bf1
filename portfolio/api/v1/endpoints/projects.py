from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.endpoints.utils import projects as project_utils
from portfolio.api.v1.helpers.responses import APIResponse, success_response
from portfolio.db.session import get_db
from portfolio.models.pydantic_models.project import (
    ProjectCreate,
    ProjectModel,
    ProjectUpdate,
)

public_router = APIRouter()
admin_router = APIRouter()


# ── public ────────────────────────────────────────────────────────────────


@public_router.get("", response_model=List[ProjectModel])
async def list_projects(
    featured: Optional[bool] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """All projects by display_order; ``?featured=true`` for the home page subset."""
    return await project_utils.list_projects(db, featured=featured)


@public_router.get("/{slug}", response_model=ProjectModel)
async def get_project(slug: str, db: AsyncSession = Depends(get_db)):
    return await project_utils.get_project_by_slug(db, slug)


# ── admin ─────────────────────────────────────────────────────────────────


@admin_router.get("", response_model=List[ProjectModel])
async def admin_list_projects(db: AsyncSession = Depends(get_db)):
    return await project_utils.list_projects(db)


@admin_router.post("", response_model=ProjectModel, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, db: AsyncSession = Depends(get_db)):
    """Create a project. The slug is derived from the title unless pinned."""
    return await project_utils.create_project(db, payload)


@admin_router.get("/{project_id}", response_model=ProjectModel)
async def admin_get_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    return await project_utils.get_project_by_id(db, project_id)


@admin_router.put("/{project_id}", response_model=ProjectModel)
async def update_project(
    project_id: UUID,
    payload: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Apply a partial update. A title change re-derives the slug unless one is pinned."""
    return await project_utils.update_project(db, project_id, payload)


@admin_router.delete("/{project_id}", response_model=APIResponse)
async def delete_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    await project_utils.delete_project(db, project_id)
    return success_response(message="Project deleted")
