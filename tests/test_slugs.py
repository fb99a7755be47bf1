"""Slug generation and unique-slug resolution."""

import re

import pytest

from portfolio.core.errors import ValidationError
from portfolio.core.slugs import ensure_unique_slug, generate_slug, require_slug

SLUG_RE = re.compile(r"^([a-z0-9]+(-[a-z0-9]+)*)?$")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello, World!", "hello-world"),
        ("  Multiple   Spaces_Here--", "multiple-spaces-here"),
        ("", ""),
        ("E Commerce Platform", "e-commerce-platform"),
        ("E-Commerce Platform", "e-commerce-platform"),
        ("a - b", "a-b"),
        ("__init__", "init"),
        ("Version 2.0 Release", "version-20-release"),
        ("🚀🚀🚀", ""),
        ("Café Menu", "caf-menu"),
        ("Hello\u00a0World", "hello-world"),
        ("Data\u2003Pipeline", "data-pipeline"),
        ("\u00a0Padded\u3000Title\u00a0", "padded-title"),
    ],
)
def test_generate_slug(text, expected):
    assert generate_slug(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Hello, World!",
        "--leading and trailing--",
        "tabs\tand\nnewlines",
        "MiXeD CaSe 123",
        "Ünïcödé Straße",
        "___",
        "-_- -_-",
        "already-a-slug",
        "non\u00a0breaking\u2009thin space",
        "ǅ weird ligatures ﬁ",
    ],
)
def test_generate_slug_shape_and_idempotence(text):
    slug = generate_slug(text)
    assert SLUG_RE.match(slug), slug
    assert generate_slug(slug) == slug


def test_require_slug_rejects_symbol_only_title():
    with pytest.raises(ValidationError) as exc:
        require_slug("!!! ???")
    assert exc.value.errors == ["title"]


async def test_unique_slug_returns_base_when_free():
    calls = []

    def exists(candidate):
        calls.append(candidate)
        return False

    assert await ensure_unique_slug("foo", exists) == "foo"
    assert calls == ["foo"]


async def test_unique_slug_skips_taken_candidates():
    taken = {"foo", "foo-2"}
    assert await ensure_unique_slug("foo", lambda c: c in taken) == "foo-3"


async def test_unique_slug_accepts_async_predicate():
    taken = {"bar"}

    async def exists(candidate):
        return candidate in taken

    assert await ensure_unique_slug("bar", exists) == "bar-2"


async def test_unique_slug_propagates_lookup_failure():
    def exists(candidate):
        raise RuntimeError("store down")

    with pytest.raises(RuntimeError, match="store down"):
        await ensure_unique_slug("foo", exists)


async def test_unique_slug_gives_up_after_cap():
    calls = []

    def exists(candidate):
        calls.append(candidate)
        return True

    with pytest.raises(ValidationError, match="no available slug"):
        await ensure_unique_slug("foo", exists, max_attempts=5)
    assert calls == ["foo", "foo-2", "foo-3", "foo-4", "foo-5"]
