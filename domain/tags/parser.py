"""Tokenizer for human-entered tag strings."""

import logging
import re
from collections.abc import Iterable

from domain.tags.config import TagConfig

logger = logging.getLogger(__name__)


def _quote_pattern(quote: str, delimiter: str) -> re.Pattern[str]:
    # (start boundary) ws quote (body) quote ws, then a zero-width end boundary
    return re.compile(
        rf"(\A|{delimiter})"
        rf"\s*{quote}(.*?){quote}\s*"
        rf"(?=(?:{delimiter})\s*|\Z)"
    )


def double_quote_pattern(config: TagConfig) -> re.Pattern[str]:
    return _quote_pattern('"', config.delimiter_pattern)


def single_quote_pattern(config: TagConfig) -> re.Pattern[str]:
    return _quote_pattern("'", config.delimiter_pattern)


def _extract_quoted(text: str, pattern: re.Pattern[str], found: list[str]) -> str:
    def _take(match: re.Match[str]) -> str:
        found.append(match.group(2))
        # keep the start delimiter so the split step still sees a boundary
        return match.group(1)

    return pattern.sub(_take, text)


def tokenize(value: str | Iterable[str] | None, config: TagConfig) -> list[str]:
    """
    Split a raw tag string into tag candidates (not yet normalized).

    Double-quoted segments are extracted first, then single-quoted ones, and the
    remainder is split on the delimiter. The result keeps that order: double-quoted
    bodies, single-quoted bodies, then split pieces.

    Examples:
        >>> tokenize('foo, "bar, baz"', TagConfig())
        ['bar, baz', 'foo', '']

    Args:
        value: Raw string, or a sequence of strings joined with the glue first
        config: Delimiter configuration

    Returns:
        Raw candidates, possibly blank or padded with whitespace
    """
    if value is None:
        text = ""
    elif isinstance(value, str):
        text = value
    else:
        text = config.effective_glue.join(str(v) for v in value)

    double_quoted: list[str] = []
    single_quoted: list[str] = []
    text = _extract_quoted(text, double_quote_pattern(config), double_quoted)
    text = _extract_quoted(text, single_quote_pattern(config), single_quoted)

    pieces = [piece for piece in re.split(config.delimiter_pattern, text) if piece is not None]

    logger.debug(
        "Tokenized input: double_quoted=%d single_quoted=%d split=%d",
        len(double_quoted),
        len(single_quoted),
        len(pieces),
    )
    return double_quoted + single_quoted + pieces
