"""Shared fixtures for the Polypost test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from polypost.core.config import SupportedLanguages
from polypost.core.types import RawDocument


@pytest.fixture
def languages() -> SupportedLanguages:
    """The default language set: zh-hans (canonical) and en."""
    return SupportedLanguages()


@pytest.fixture
def make_raw():
    """Factory for raw documents living at /blog/<directory>/<file>."""

    def _make(
        directory: str,
        lang_key: str | None,
        *,
        body: str = "",
        slug: str | None = None,
        filename: str | None = None,
        title: str | None = None,
    ) -> RawDocument:
        name = filename or (f"index.{lang_key}.md" if lang_key else "index.md")
        return RawDocument(
            path=Path("/blog") / directory / name,
            body=body,
            slug=slug or f"/{lang_key or 'unknown'}/{directory}/",
            lang_key=lang_key,
            title=title,
        )

    return _make


@pytest.fixture
def write_post(tmp_path: Path):
    """Write a Markdown post under tmp_path/content/blog and return its path."""

    def _write(directory: str, filename: str, text: str) -> Path:
        post_dir = tmp_path / "content" / "blog" / directory
        post_dir.mkdir(parents=True, exist_ok=True)
        path = post_dir / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write
