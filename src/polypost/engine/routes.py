"""Post route construction for translation groups."""

import logging
from collections.abc import Set
from typing import Any

from polypost.core.config import SupportedLanguages
from polypost.core.ports import LinkRewriter
from polypost.core.types import ComponentKind, Document, Group, Route

logger = logging.getLogger(__name__)


class TranslatedLinkRewriter:
    """Finds internal links that already have a translation in the post's language.

    A link qualifies when it is a known slug and ``/<lang><link>`` is a
    known slug too. Links written against a translated slug are reported,
    since authors should always link to the original post.
    """

    def __init__(self, languages: SupportedLanguages) -> None:
        self.languages = languages

    def rewrite(self, doc: Document, known_slugs: Set[str]) -> list[str]:
        if not doc.lang_key or self.languages.is_canonical(doc.lang_key):
            return []

        prefix = f"/{doc.lang_key}"
        translated_links: list[str] = []
        for link in doc.maybe_absolute_links:
            if link not in known_slugs:
                continue
            if prefix + link in known_slugs:
                translated_links.append(link)
            elif link.startswith(prefix + "/"):
                logger.warning(
                    "'%s' translation of '%s' links to a translated post: %s. "
                    "Link to the original post instead; a translation is used automatically when available.",
                    doc.lang_key,
                    doc.title or doc.slug,
                    link,
                )
        return translated_links


class RouteBuilder:
    """Emits one post route per document of a group.

    Posts in the canonical language carry ``previous``/``next`` placeholders;
    other languages do not, unless ``uniform_context`` is set.
    """

    def __init__(
        self,
        languages: SupportedLanguages,
        link_rewriter: LinkRewriter | None = None,
        known_slugs: Set[str] = frozenset(),
        *,
        uniform_context: bool = False,
    ) -> None:
        self.languages = languages
        self.link_rewriter = link_rewriter
        self.known_slugs = known_slugs
        self.uniform_context = uniform_context

    def build(self, group: Group) -> list[Route]:
        return [self._post_route(doc, group.translations) for doc in group.members]

    def _post_route(self, doc: Document, translations: list[str]) -> Route:
        context: dict[str, Any] = {"slug": doc.slug}
        if self.uniform_context or self.languages.is_canonical(doc.lang_key):
            context["next"] = None
            context["previous"] = None
        context["translations"] = list(translations)
        context["translatedLinks"] = self._translated_links(doc)

        return Route(path=doc.slug, component_kind=ComponentKind.POST, context=context)

    def _translated_links(self, doc: Document) -> list[str]:
        if self.link_rewriter is None:
            return []
        return self.link_rewriter.rewrite(doc, self.known_slugs)
