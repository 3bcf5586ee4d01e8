"""Core exceptions for Polypost."""


class PolypostError(Exception):
    """Base exception for all Polypost errors."""


class ConfigurationError(PolypostError):
    """Raised when the configuration file or settings are invalid."""


class DataFetchError(PolypostError):
    """Raised when the content query reports errors.

    Fatal to the whole build: no route table is produced.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Content query failed with {len(self.errors)} error(s): " + "; ".join(self.errors))


class MalformedDocumentError(PolypostError):
    """Base exception for documents that cannot be routed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class MissingLanguageError(MalformedDocumentError):
    """Raised when a document carries no language code."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "document has no language code")


class UnsupportedLanguageError(MalformedDocumentError):
    """Raised when a document's language code is not configured."""

    def __init__(self, path: str, lang_key: str) -> None:
        self.lang_key = lang_key
        super().__init__(path, f"language '{lang_key}' is not a supported language")
