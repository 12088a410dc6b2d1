"""Shared pytest fixtures for enu tests."""

import textwrap
from pathlib import Path

import pytest

from enu.core.registry import EnumType, define_enum

EXPLICIT_DEFINITION = {"one": 1, "two": 2}
IMPLICIT_DEFINITION = ["one", "two"]

BLOG_TOML = textwrap.dedent("""\
    [project]
    name = "blog"
    version = "0.1.0"

    [export]
    indent = 2

    [enums.PostStatus]
    title = "Post Status"
    options = ["draft", "published", { name = "moderated", value = 10 }, "deleted"]

    [enums.ArchivedPostStatus]
    extends = "PostStatus"
    options = ["archived"]

    [enums.Priority]
    options = ["low", "medium", "high"]
""")


@pytest.fixture
def explicit_enum() -> EnumType:
    """Return an enum declared with explicit values."""
    return define_enum("Explicit", EXPLICIT_DEFINITION)


@pytest.fixture
def implicit_enum() -> EnumType:
    """Return an enum declared with auto-assigned values."""
    return define_enum("Implicit", IMPLICIT_DEFINITION)


@pytest.fixture
def post_status() -> EnumType:
    """Return the post status enum: draft, published, moderated=10, deleted."""
    return define_enum(
        "PostStatus",
        ["draft", "published", ("moderated", 10), "deleted"],
        title="Post Status",
    )


@pytest.fixture
def blog_manifest(tmp_path: Path) -> Path:
    """Write a small enu.toml and return its path."""
    path = tmp_path / "enu.toml"
    path.write_text(BLOG_TOML, encoding="utf-8")
    return path
