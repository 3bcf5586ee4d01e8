"""Build pipeline: content query -> fields -> groups -> routes."""

import logging

from polypost.core.config import PolypostConfig, RoutingSettings, SupportedLanguages
from polypost.core.exceptions import DataFetchError, MalformedDocumentError
from polypost.core.ports import ContentSource, RouteSink
from polypost.core.types import Document, Group, RawDocument, Route, RouteTable
from polypost.engine.fields import FieldDeriver
from polypost.engine.grouping import TranslationGrouper
from polypost.engine.index import IndexRouteEmitter
from polypost.engine.routes import RouteBuilder, TranslatedLinkRewriter

logger = logging.getLogger(__name__)


def derive_documents(raw_documents: list[RawDocument], languages: SupportedLanguages) -> list[Document]:
    """Run field derivation once per document.

    Documents whose language is missing or unsupported keep an unset
    ``lang_key`` so that grouping excludes them.
    """
    deriver = FieldDeriver(languages)
    documents = []
    for raw in raw_documents:
        try:
            fields = deriver.derive(raw)
        except MalformedDocumentError as e:
            logger.warning("%s; the document will not be routed", e)
            fields = deriver.derive_lenient(raw)
        documents.append(Document.from_raw(raw, fields))
    return documents


def build_route_table(
    raw_documents: list[RawDocument],
    languages: SupportedLanguages,
    routing: RoutingSettings | None = None,
) -> RouteTable:
    """Pure, in-memory route building for an already loaded document set."""
    routing = routing or RoutingSettings()
    documents = derive_documents(raw_documents, languages)
    groups = TranslationGrouper().group(documents)

    rewriter = TranslatedLinkRewriter(languages) if routing.rewrite_translated_links else None
    builder = RouteBuilder(
        languages,
        link_rewriter=rewriter,
        known_slugs=frozenset(doc.slug for doc in documents),
        uniform_context=routing.uniform_post_context,
    )

    routes: list[Route] = IndexRouteEmitter().emit(languages)
    for group in groups.values():
        routes.extend(builder.build(group))

    logger.info(
        "Built %d routes (%d groups, %d of %d documents routed)",
        len(routes),
        len(groups),
        sum(len(group.members) for group in groups.values()),
        len(documents),
    )
    return RouteTable(routes=routes, documents=documents)


def group_documents(raw_documents: list[RawDocument], languages: SupportedLanguages) -> dict[str, Group]:
    return TranslationGrouper().group(derive_documents(raw_documents, languages))


class BuildPipeline:
    """Runs one build: query content, build routes, publish the table.

    A content query that reports errors aborts the build before anything
    is published.
    """

    def __init__(self, config: PolypostConfig, source: ContentSource, sink: RouteSink | None = None) -> None:
        self.config = config
        self.source = source
        self.sink = sink

    def fetch(self) -> list[RawDocument]:
        result = self.source.query()
        if result.errors:
            for error in result.errors:
                logger.error("Content query error: %s", error)
            raise DataFetchError(result.errors)
        return result.documents

    def run(self) -> RouteTable:
        table = build_route_table(self.fetch(), self.config.i18n, self.config.routing)
        if self.sink is not None:
            self.sink.publish(table)
        return table
