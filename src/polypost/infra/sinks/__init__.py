"""Output sinks for route tables."""

from polypost.infra.sinks.json import JsonRouteSink

__all__ = ["JsonRouteSink"]
