"""
Project persistence helpers: slug assignment and create/update/delete.

Slug uniqueness is ultimately enforced by the ``uq_project_slug`` constraint.
The existence probe in ``ensure_unique_slug`` only avoids the common rejected
insert; a concurrent writer can still claim the same slug between the probe
and the commit, which surfaces as ``DuplicateKey``.
"""

from uuid import UUID
import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.errors import DuplicateKey, NotFound
from portfolio.core.slugs import ensure_unique_slug, require_slug
from portfolio.models.projects import Project
from portfolio.models.pydantic_models.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


async def slug_exists(
    db: AsyncSession, slug: str, exclude_id: UUID | None = None
) -> bool:
    stmt = select(exists().where(Project.slug == slug))
    if exclude_id is not None:
        stmt = select(
            exists().where(Project.slug == slug, Project.project_id != exclude_id)
        )
    result = await db.execute(stmt)
    return bool(result.scalar())


async def resolve_slug(
    db: AsyncSession,
    title: str,
    pinned_slug: str | None = None,
    exclude_id: UUID | None = None,
) -> str:
    """Pick the slug for a project being written.

    A pinned slug is normalised and must be free; otherwise the title is
    slugified and suffixed until free.
    """
    if pinned_slug:
        slug = require_slug(pinned_slug, field="slug")
        if await slug_exists(db, slug, exclude_id):
            raise DuplicateKey(f"A project with slug '{slug}' already exists")
        return slug

    base = require_slug(title, field="title")
    return await ensure_unique_slug(
        base, lambda candidate: slug_exists(db, candidate, exclude_id)
    )


async def list_projects(db: AsyncSession, featured: bool | None = None) -> list[Project]:
    stmt = select(Project).order_by(Project.display_order.asc(), Project.created_at.asc())
    if featured is not None:
        stmt = stmt.where(Project.is_featured.is_(featured))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_project_by_slug(db: AsyncSession, slug: str) -> Project:
    result = await db.execute(select(Project).where(Project.slug == slug))
    project = result.scalar_one_or_none()
    if project is None:
        raise NotFound(f"Project '{slug}' not found")
    return project


async def get_project_by_id(db: AsyncSession, project_id: UUID) -> Project:
    result = await db.execute(select(Project).where(Project.project_id == project_id))
    project = result.scalar_one_or_none()
    if project is None:
        raise NotFound("Project not found")
    return project


async def _commit_or_conflict(db: AsyncSession, slug: str) -> None:
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("Slug '%s' was claimed concurrently", slug)
        raise DuplicateKey(
            f"A project with slug '{slug}' already exists, retry the request"
        )


async def create_project(db: AsyncSession, payload: ProjectCreate) -> Project:
    data = payload.model_dump()
    data["slug"] = await resolve_slug(db, payload.title, payload.slug)

    project = Project(**data)
    db.add(project)
    await _commit_or_conflict(db, project.slug)

    logger.info("Created project %s (%s)", project.project_id, project.slug)
    return project


async def update_project(
    db: AsyncSession, project_id: UUID, payload: ProjectUpdate
) -> Project:
    project = await get_project_by_id(db, project_id)
    changes = payload.model_dump(exclude_unset=True)
    pinned_slug = changes.pop("slug", None)

    if pinned_slug:
        project.slug = await resolve_slug(
            db, project.title, pinned_slug, exclude_id=project.project_id
        )
    elif "title" in changes and changes["title"] != project.title:
        project.slug = await resolve_slug(
            db, changes["title"], exclude_id=project.project_id
        )

    for field, value in changes.items():
        setattr(project, field, value)

    await _commit_or_conflict(db, project.slug)
    return project


async def delete_project(db: AsyncSession, project_id: UUID) -> None:
    project = await get_project_by_id(db, project_id)
    await db.delete(project)
    await db.commit()
    logger.info("Deleted project %s", project_id)
