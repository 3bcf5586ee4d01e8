"""Polypost: multilingual blog route builder."""

__version__ = "0.1.0"
