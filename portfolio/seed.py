"""
One-shot seeding entry point: ``portfolio-seed`` / ``python -m portfolio.seed``.

Wipes and repopulates admins, projects and content sections with sample data.
Never mounted on the API; run it by hand against a fresh or disposable database.
"""

import asyncio
import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.v1.endpoints.utils.content import validate_content
from portfolio.bootstrap import ensure_default_admin
from portfolio.db.session import dispose_engine, get_session_local
from portfolio.models.admin_users import AdminUser
from portfolio.models.content_sections import ContentSection
from portfolio.models.projects import Project

logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "slug": "e-commerce-platform",
        "short_description": "A full-featured e-commerce platform with payment integration",
        "detailed_description": (
            "Product catalog, shopping cart, payment processing with Stripe, "
            "and an admin dashboard."
        ),
        "tech_stack": ["React", "Node.js", "MongoDB", "Stripe"],
        "category": "E-Commerce",
        "cover_image_url": "https://via.placeholder.com/400x300?text=E-Commerce",
        "github_url": "https://github.com/example/ecommerce",
        "live_url": "https://ecommerce.example.com",
        "is_featured": True,
        "display_order": 1,
        "readme_content": (
            "# E-Commerce Platform\n\n"
            "## Features\n"
            "- Product catalog with search and filtering\n"
            "- Shopping cart management\n"
            "- Payment integration with Stripe\n"
            "- Admin dashboard\n"
        ),
    },
    {
        "title": "Real Estate Management System",
        "slug": "real-estate-management",
        "short_description": "A property management and listing platform",
        "detailed_description": (
            "Property listings, client management and document handling for "
            "agents and brokers."
        ),
        "tech_stack": ["React", "TypeScript", "Firebase", "Google Maps API"],
        "category": "Real Estate",
        "cover_image_url": "https://via.placeholder.com/400x300?text=Real+Estate",
        "github_url": "https://github.com/example/realestate",
        "live_url": "https://realestate.example.com",
        "is_featured": True,
        "display_order": 2,
        "readme_content": (
            "# Real Estate Management System\n\n"
            "## Features\n"
            "- Property listings\n"
            "- Client management\n"
            "- Document upload\n"
        ),
    },
    {
        "title": "Task Management App",
        "slug": "task-management-app",
        "short_description": "A collaborative task and project management application",
        "detailed_description": "Task tracking, sprint planning and team communication.",
        "tech_stack": ["Vue.js", "Node.js", "PostgreSQL", "WebSocket"],
        "category": "Web Apps",
        "cover_image_url": "https://via.placeholder.com/400x300?text=Task+Manager",
        "github_url": "https://github.com/example/taskmanager",
        "is_featured": False,
        "display_order": 3,
        "readme_content": "# Task Management App\n\nTask management for small teams.\n",
    },
]

SAMPLE_CONTENT = {
    "hero": {
        "title": "Hi, I'm a Full Stack Developer",
        "subtitle": "I build web applications end to end",
        "ctas": [
            {"text": "View My Work", "href": "/projects"},
            {"text": "Get in Touch", "href": "/contact"},
        ],
    },
    "about": {
        "summary": "Full-stack developer working with modern web technologies.",
        "highlights": [
            "Built 20+ web applications",
            "Open source contributor",
        ],
    },
    "skills": {
        "frontend": ["React", "TypeScript", "Tailwind CSS"],
        "backend": ["Python", "FastAPI", "PostgreSQL"],
        "devops": ["Docker", "GitHub Actions", "Nginx"],
    },
    "contact": {
        "email": "hello@example.com",
        "phone": "",
        "address": "",
        "whatsapp_number": "",
    },
    "social": {
        "github": "https://github.com/example",
        "linkedin": "https://linkedin.com/in/example",
    },
    "banners": {
        "items": [
            {
                "image_url": "https://via.placeholder.com/1200x400?text=Banner+1",
                "alt": "Portfolio Banner 1",
                "link_url": "/projects",
                "order": 1,
            },
        ],
    },
    "backgrounds": {},
}


async def seed(db: AsyncSession) -> None:
    await db.execute(delete(AdminUser))
    await db.execute(delete(Project))
    await db.execute(delete(ContentSection))
    await db.commit()

    await ensure_default_admin(db)
    logger.info("Admin user created")

    db.add_all(Project(**p) for p in SAMPLE_PROJECTS)
    await db.commit()
    logger.info("Seeded %d projects", len(SAMPLE_PROJECTS))

    db.add_all(
        ContentSection(key=key, content=validate_content(key, content))
        for key, content in SAMPLE_CONTENT.items()
    )
    await db.commit()
    logger.info("Seeded %d content sections", len(SAMPLE_CONTENT))


async def _run() -> None:
    AsyncSessionLocal = get_session_local()
    try:
        async with AsyncSessionLocal() as db:
            await seed(db)
    finally:
        await dispose_engine()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger.info("Seeding database...")
    asyncio.run(_run())
    logger.info("Database seeded successfully")


if __name__ == "__main__":
    main()
