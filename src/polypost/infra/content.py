"""Filesystem content source: one Markdown file per post and language.

Posts live in one directory each; ``index.md`` is written in the
canonical language and ``index.<lang>.md`` holds a translation::

    content/blog/hello-world/index.md      -> /hello-world/
    content/blog/hello-world/index.en.md   -> /en/hello-world/
"""

from __future__ import annotations

import logging
import math
import re
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from polypost.core.config import SupportedLanguages
from polypost.core.ports import QueryResult
from polypost.core.types import RawDocument

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 265
_WORD_PATTERN = re.compile(r"\w+")


def language_from_filename(path: Path, canonical: str) -> str:
    """``index.md`` -> canonical code, ``index.en.md`` -> ``en``."""
    suffixes = path.name.split(".")[1:-1]
    if not suffixes:
        return canonical
    return suffixes[-1]


def post_slug(directory: str, lang_key: str | None, canonical: str) -> str:
    if not lang_key or lang_key == canonical:
        return f"/{directory}/"
    return f"/{lang_key}/{directory}/"


def estimate_reading_time(body: str) -> int:
    """Minutes needed to read ``body``, never less than one."""
    words = len(_WORD_PATTERN.findall(body))
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def _coerce_date(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def _coerce_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
    return tuple(str(tag) for tag in value)


def _coerce_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _duplicate_slug_errors(documents: list[RawDocument]) -> list[str]:
    """One error per document whose slug was already taken by an earlier one."""
    seen: dict[str, Path] = {}
    errors = []
    for doc in documents:
        first = seen.setdefault(doc.slug, doc.path)
        if first != doc.path:
            errors.append(f"{doc.path}: slug {doc.slug} is already used by {first}")
    return errors


class FilesystemContentSource:
    """Loads every Markdown document below ``content_dir``.

    Read or parse failures are collected as errors on the query result
    instead of being raised, so the caller sees all of them at once.
    """

    def __init__(self, content_dir: Path, languages: SupportedLanguages) -> None:
        self.content_dir = Path(content_dir)
        self.languages = languages

    def query(self) -> QueryResult:
        if not self.content_dir.is_dir():
            return QueryResult(errors=[f"Content directory not found: {self.content_dir}"])

        documents: list[RawDocument] = []
        errors: list[str] = []
        for path in sorted(self.content_dir.rglob("*.md")):
            try:
                documents.append(self.load(path))
            except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError, TypeError) as e:
                errors.append(f"{path}: {e}")

        errors.extend(_duplicate_slug_errors(documents))

        logger.info("Loaded %d documents from %s", len(documents), self.content_dir)
        # Newest first, like the blog index; stable on path for equal dates.
        documents.sort(key=lambda doc: str(doc.path))
        documents.sort(key=lambda doc: doc.date or datetime.min, reverse=True)
        return QueryResult(documents=documents, errors=errors)

    def load(self, path: Path) -> RawDocument:
        post = frontmatter.loads(path.read_text(encoding="utf-8"))
        metadata = post.metadata

        lang_key = str(metadata.get("lang") or language_from_filename(path, self.languages.canonical))
        body = post.content
        return RawDocument(
            path=path.resolve(),
            body=body,
            slug=post_slug(path.parent.name, lang_key, self.languages.canonical),
            lang_key=lang_key,
            title=_coerce_text(metadata.get("title")),
            date=_coerce_date(metadata.get("date")),
            tags=_coerce_tags(metadata.get("tags")),
            excerpt=_coerce_text(metadata.get("spoiler") or metadata.get("excerpt")),
            time_to_read=estimate_reading_time(body),
        )
