"""Core Data Types for Polypost."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# --- Content Domain ---
class RawDocument(BaseModel):
    """One content file as handed over by the content source.

    ``slug`` is computed upstream and must be unique across the site.
    ``lang_key`` is supplied by the source, not validated yet.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    body: str
    slug: str
    lang_key: str | None = None
    title: str | None = None
    date: datetime | None = None
    tags: tuple[str, ...] = ()
    excerpt: str | None = None
    time_to_read: int = 1


class DocumentFields(BaseModel):
    """Structural fields derived once per document."""

    model_config = ConfigDict(frozen=True)

    group_key: str | None
    lang_key: str | None
    candidate_links: frozenset[str] = frozenset()


class Document(RawDocument):
    """A content file plus its derived routing metadata."""

    group_key: str | None = None
    candidate_links: frozenset[str] = frozenset()

    @classmethod
    def from_raw(cls, raw: RawDocument, fields: DocumentFields) -> "Document":
        data = raw.model_dump()
        data.update(
            group_key=fields.group_key,
            lang_key=fields.lang_key,
            candidate_links=fields.candidate_links,
        )
        return cls.model_validate(data)

    @property
    def directory_name(self) -> str | None:
        return self.group_key

    @property
    def maybe_absolute_links(self) -> list[str]:
        return sorted(self.candidate_links)

    @property
    def is_routable(self) -> bool:
        return bool(self.group_key) and bool(self.lang_key)

    def node_fields(self) -> dict[str, Any]:
        """Side-channel fields attached back to the document for renderers."""
        return {
            "slug": self.slug,
            "langKey": self.lang_key,
            "directoryName": self.directory_name,
            "maybeAbsoluteLinks": self.maybe_absolute_links,
        }


class Group(BaseModel):
    """All documents sharing a group key: one logical post across languages."""

    group_key: str
    members: list[Document] = Field(default_factory=list)
    translations: list[str] = Field(default_factory=list)

    @property
    def distinct_translations(self) -> set[str]:
        return set(self.translations)

    @property
    def has_duplicate_languages(self) -> bool:
        return len(self.distinct_translations) < len(self.translations)


# --- Routing Domain ---
class ComponentKind(str, Enum):
    INDEX = "index"
    POST = "post"


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    component_kind: ComponentKind
    context: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "component": self.component_kind.value,
            "context": self.context,
        }


class RouteTable(BaseModel):
    """Everything one build produces for the render collaborator."""

    routes: list[Route] = Field(default_factory=list)
    documents: list[Document] = Field(default_factory=list)

    @property
    def index_routes(self) -> list[Route]:
        return [route for route in self.routes if route.component_kind == ComponentKind.INDEX]

    @property
    def post_routes(self) -> list[Route]:
        return [route for route in self.routes if route.component_kind == ComponentKind.POST]

    def paths(self) -> list[str]:
        return [route.path for route in self.routes]

    def to_dict(self) -> dict[str, Any]:
        """Deterministic, JSON-ready form of the table."""
        return {
            "routes": [route.to_dict() for route in sorted(self.routes, key=lambda r: r.path)],
            "documents": [doc.node_fields() for doc in sorted(self.documents, key=lambda d: d.slug)],
        }
