"""
Slug generation and unique-slug resolution for URL-addressable entities.
"""

import inspect
import re
from collections.abc import Awaitable, Callable

from portfolio.config import settings
from portfolio.core.errors import ValidationError

_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")

SlugExists = Callable[[str], Awaitable[bool] | bool]


def generate_slug(text: str) -> str:
    """Normalise *text* into a lowercase ``[a-z0-9-]`` identifier.

    Non-ASCII letters are dropped, not transliterated, but any Unicode whitespace
    still separates words. Input made up only of stripped characters produces
    an empty string.
    """
    slug = text.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def require_slug(text: str, field: str = "title") -> str:
    slug = generate_slug(text)
    if not slug:
        raise ValidationError(
            f"{field} must contain at least one letter or digit",
            errors=[field],
        )
    return slug


async def ensure_unique_slug(
    base_slug: str,
    exists: SlugExists,
    max_attempts: int | None = None,
) -> str:
    """Return *base_slug*, or the first free ``base_slug-N`` for N = 2, 3, ...

    ``exists`` may be sync or async. Its failures propagate unchanged; a
    failed lookup is never read as "free".
    """
    limit = max_attempts if max_attempts is not None else settings.slug_max_attempts
    candidate = base_slug
    counter = 2

    while await _check(exists, candidate):
        if counter > limit:
            raise ValidationError(
                "title produces no available slug",
                errors=["slug"],
            )
        candidate = f"{base_slug}-{counter}"
        counter += 1

    return candidate


async def _check(exists: SlugExists, candidate: str) -> bool:
    result = exists(candidate)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)
