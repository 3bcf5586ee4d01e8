"""Route building engine."""

from polypost.engine.fields import FieldDeriver
from polypost.engine.grouping import TranslationGrouper
from polypost.engine.index import IndexRouteEmitter
from polypost.engine.pipeline import BuildPipeline, build_route_table
from polypost.engine.routes import RouteBuilder, TranslatedLinkRewriter

__all__ = [
    "BuildPipeline",
    "FieldDeriver",
    "IndexRouteEmitter",
    "RouteBuilder",
    "TranslatedLinkRewriter",
    "TranslationGrouper",
    "build_route_table",
]
