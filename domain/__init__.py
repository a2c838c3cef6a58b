"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- tags: tag list parsing, normalization, serialization and configuration
"""

from domain.tags import InvalidOptionKey, TagConfig, TagList, parse

__all__ = [
    "TagList",
    "TagConfig",
    "InvalidOptionKey",
    "parse",
]
