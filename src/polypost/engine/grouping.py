import logging

from polypost.core.types import Document, Group

logger = logging.getLogger(__name__)


class TranslationGrouper:
    """Groups documents that are translations of the same post."""

    def group(self, documents: list[Document]) -> dict[str, Group]:
        """Bucket routable documents by group key, in iteration order.

        Documents missing a group key or a language code are excluded.
        ``translations`` lists every member's language code in member
        order; two members sharing a code both appear in it.
        """
        groups: dict[str, Group] = {}

        for doc in documents:
            if not doc.is_routable:
                logger.warning("Skipping %s: missing directory name or language code", doc.path)
                continue
            if doc.group_key not in groups:
                groups[doc.group_key] = Group(group_key=doc.group_key)
            groups[doc.group_key].members.append(doc)

        for group in groups.values():
            group.translations = [member.lang_key for member in group.members]
            if group.has_duplicate_languages:
                logger.warning(
                    "Group '%s' has more than one document per language: %s",
                    group.group_key,
                    group.translations,
                )

        return groups
