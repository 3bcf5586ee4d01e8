"""Per-document field derivation: group key, language and link candidates."""

import re
from collections.abc import Iterator

from polypost.core.config import SupportedLanguages
from polypost.core.exceptions import MissingLanguageError, UnsupportedLanguageError
from polypost.core.types import DocumentFields, RawDocument

# Markdown link whose target starts and ends with a slash: [text](/some/path/)
ABSOLUTE_LINK_PATTERN = re.compile(r"\]\((/[^)]+/)\)")


def iter_absolute_links(markdown: str) -> Iterator[str]:
    """Yield every absolute-looking link target in ``markdown``, in order.

    Matches do not overlap. Each call starts a fresh scan.
    """
    for match in ABSOLUTE_LINK_PATTERN.finditer(markdown):
        yield match.group(1)


def find_absolute_links(markdown: str) -> frozenset[str]:
    return frozenset(iter_absolute_links(markdown))


def directory_name(doc: RawDocument) -> str | None:
    """Name of the directory that contains the document's file."""
    name = doc.path.parent.name
    return name or None


class FieldDeriver:
    """Derives the structural fields of one document.

    Args:
        languages: The configured supported languages used to validate
            each document's language code.

    """

    def __init__(self, languages: SupportedLanguages) -> None:
        self.languages = languages

    def derive(self, doc: RawDocument) -> DocumentFields:
        """Derive ``group_key``, ``lang_key`` and ``candidate_links``.

        Raises:
            MissingLanguageError: the document carries no language code.
            UnsupportedLanguageError: the code is not a configured language.

        """
        lang_key = self.validate_language(doc)
        return DocumentFields(
            group_key=directory_name(doc),
            lang_key=lang_key,
            candidate_links=find_absolute_links(doc.body),
        )

    def derive_lenient(self, doc: RawDocument) -> DocumentFields:
        """Like :meth:`derive` but leaves ``lang_key`` unset instead of raising."""
        return DocumentFields(
            group_key=directory_name(doc),
            lang_key=None,
            candidate_links=find_absolute_links(doc.body),
        )

    def validate_language(self, doc: RawDocument) -> str:
        if not doc.lang_key:
            raise MissingLanguageError(str(doc.path))
        if doc.lang_key not in self.languages:
            raise UnsupportedLanguageError(str(doc.path), doc.lang_key)
        return doc.lang_key
