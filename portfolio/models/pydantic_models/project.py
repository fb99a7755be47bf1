from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    short_description: str = Field(..., min_length=1, max_length=500)
    detailed_description: Optional[str] = None
    tech_stack: List[str] = []
    category: Optional[str] = None
    cover_image_url: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    is_featured: bool = False
    display_order: int = 0
    readme_content: Optional[str] = None


class ProjectUpdate(BaseModel):
    """Partial update: only fields present in the request body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    short_description: Optional[str] = Field(None, min_length=1, max_length=500)
    detailed_description: Optional[str] = None
    tech_stack: Optional[List[str]] = None
    category: Optional[str] = None
    cover_image_url: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None
    readme_content: Optional[str] = None

    @field_validator(
        "title", "short_description", "tech_stack", "is_featured", "display_order"
    )
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class ProjectModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    project_id: UUID
    title: str
    slug: str
    short_description: str
    detailed_description: Optional[str] = None
    tech_stack: List[str] = []
    category: Optional[str] = None
    cover_image_url: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    is_featured: bool
    display_order: int
    readme_content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
