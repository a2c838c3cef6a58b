"""Serialize tag names back into an editable string."""

import re
from collections.abc import Iterable

from domain.tags.config import TagConfig
from domain.tags.normalizer import clean


_QUOTE_CHARS = "\"'"


def _is_quote_wrapped(name: str) -> bool:
    return len(name) >= 2 and name[0] == name[-1] and name[0] in _QUOTE_CHARS


def quote_if_needed(name: str, config: TagConfig) -> str:
    """
    Wrap a tag in double quotes when parsing the bare tag would change it.

    That is the case when it contains a configured delimiter, or when it already
    starts and ends with the same quote character.
    """
    if re.search(config.delimiter_pattern, name) or _is_quote_wrapped(name):
        return f'"{name}"'
    return name


def serialize(names: Iterable[str], config: TagConfig) -> str:
    """
    Join tags with the configured glue, quoting the ones that contain a delimiter.

    The input is normalized on a copy first; it is never modified.

    Examples:
        >>> serialize(["Round", "Square,Cube"], TagConfig())
        'Round, "Square,Cube"'
    """
    return config.effective_glue.join(quote_if_needed(name, config) for name in clean(list(names), config))
