from collections.abc import Set
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from polypost.core.types import Document, RawDocument, RouteTable


class QueryResult(BaseModel):
    """Outcome of one content query: every document, or the errors that prevented it."""

    documents: list[RawDocument] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


@runtime_checkable
class ContentSource(Protocol):
    """Loads every content document once per build."""

    def query(self) -> QueryResult: ...


@runtime_checkable
class LinkRewriter(Protocol):
    """Decides which internal links of a post have a translated target."""

    def rewrite(self, doc: Document, known_slugs: Set[str]) -> list[str]:
        """Returns the candidate links of ``doc`` that should point to a translation."""
        ...


@runtime_checkable
class RouteSink(Protocol):
    """Final destination for a built route table (e.g. a JSON file)."""

    def publish(self, table: RouteTable) -> None: ...
