from polypost.core.config import SupportedLanguages
from polypost.core.types import ComponentKind, Route


class IndexRouteEmitter:
    """Emits exactly one blog index route per supported language."""

    def emit(self, languages: SupportedLanguages) -> list[Route]:
        return [
            Route(
                path=languages.index_path(code),
                component_kind=ComponentKind.INDEX,
                context={"langKey": code},
            )
            for code in languages.codes
        ]
