"""
Tag list handling: parsing, normalization and serialization.

All functions in this module are pure (no file I/O). The shared configuration is
the only process-wide state; see domain.tags.config.
"""

from domain.tags.config import TagConfig, configure, get_config, reset_config
from domain.tags.errors import InvalidOptionKey
from domain.tags.loader import parse_tag_config
from domain.tags.normalizer import clean, parameterize
from domain.tags.parser import tokenize
from domain.tags.serializer import serialize
from domain.tags.tag_list import TagList

parse = TagList.from_string

__all__ = [
    "TagList",
    "parse",
    "TagConfig",
    "get_config",
    "configure",
    "reset_config",
    "parse_tag_config",
    "InvalidOptionKey",
    "clean",
    "parameterize",
    "tokenize",
    "serialize",
]
