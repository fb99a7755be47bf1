"""
Typed content section documents.

Each ``ContentKey`` has its own record type; a section is the tagged union of
``{"key": <key>, "content": <record>}`` variants, discriminated on ``key``.
Unknown fields inside a record are kept so that the admin UI can add fields
without a backend release.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _ContentRecord(BaseModel):
    model_config = ConfigDict(extra="allow")


class CallToAction(_ContentRecord):
    text: str
    href: str


class HeroContent(_ContentRecord):
    title: str = ""
    subtitle: str = ""
    ctas: List[CallToAction] = []
    background_image: Optional[str] = None


class AboutContent(_ContentRecord):
    summary: str = ""
    highlights: List[str] = []
    background_image: Optional[str] = None


class SkillsContent(_ContentRecord):
    frontend: List[str] = []
    backend: List[str] = []
    devops: List[str] = []
    background_image: Optional[str] = None


class ContactContent(_ContentRecord):
    email: str = ""
    phone: str = ""
    address: str = ""
    whatsapp_number: str = ""


class SocialContent(_ContentRecord):
    """Free map of network name to profile URL (github, linkedin, ...)."""


class Banner(_ContentRecord):
    image_url: str
    alt: str = ""
    link_url: Optional[str] = None
    order: int = 0


class BannersContent(_ContentRecord):
    items: List[Banner] = []


class BackgroundsContent(_ContentRecord):
    hero: Optional[str] = None
    about: Optional[str] = None
    skills: Optional[str] = None
    projects: Optional[str] = None


class HeroSection(BaseModel):
    key: Literal["hero"]
    content: HeroContent


class AboutSection(BaseModel):
    key: Literal["about"]
    content: AboutContent


class SkillsSection(BaseModel):
    key: Literal["skills"]
    content: SkillsContent


class ContactSection(BaseModel):
    key: Literal["contact"]
    content: ContactContent


class SocialSection(BaseModel):
    key: Literal["social"]
    content: SocialContent


class BannersSection(BaseModel):
    key: Literal["banners"]
    content: BannersContent


class BackgroundsSection(BaseModel):
    key: Literal["backgrounds"]
    content: BackgroundsContent


ContentSectionDocument = Annotated[
    Union[
        HeroSection,
        AboutSection,
        SkillsSection,
        ContactSection,
        SocialSection,
        BannersSection,
        BackgroundsSection,
    ],
    Field(discriminator="key"),
]

content_section_adapter: TypeAdapter[ContentSectionDocument] = TypeAdapter(
    ContentSectionDocument
)


class ContentSectionModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    content: Dict[str, Any]
    updated_at: Optional[datetime] = None
