"""Analyzers over the parsed syntax model."""

from ngreflect.infrastructure.analyzers.import_analyzer import ImportAnalyzer, ImportTable

__all__ = [
    "ImportAnalyzer",
    "ImportTable",
]
