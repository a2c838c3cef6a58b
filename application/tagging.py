"""Tag parsing and formatting use cases."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from domain.tags import TagConfig, TagList
from infrastructure.observability import clear_log_context, set_log_context

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """One raw input and the tag list parsed from it."""

    source: str
    raw: str
    tags: TagList = field(repr=False)

    @property
    def serialized(self) -> str:
        return self.tags.serialize()


def parse_inputs(inputs: Iterable[tuple[str, str]], config: TagConfig) -> list[ParseResult]:
    """
    Parse each (source, raw tag string) pair into a TagList.

    Args:
        inputs: Pairs of source label (e.g. "argv[1]", "tags.txt:3") and raw text
        config: Tag configuration used for every input

    Returns:
        One ParseResult per input, in order
    """
    results: list[ParseResult] = []
    try:
        for source, raw in inputs:
            set_log_context(source=source, raw_input=raw)
            tags = TagList.from_string(raw, config=config)
            logger.debug("Parsed %d tag(s)", len(tags))
            if not tags:
                logger.warning("Input produced no tags")
            results.append(ParseResult(source=source, raw=raw, tags=tags))
    finally:
        clear_log_context()

    logger.info("Parsed %d input(s)", len(results))
    return results


def format_tags(names: Iterable[str], config: TagConfig) -> str:
    """
    Normalize tag names and serialize them into one editable tag string.

    Names are taken verbatim (no parsing); names containing a delimiter get quoted.
    """
    tags = TagList(config=config).concat(list(names))
    output = tags.serialize()
    logger.info("Formatted %d tag(s)", len(tags))
    return output


def merge_inputs(inputs: Iterable[tuple[str, str]], config: TagConfig) -> TagList:
    """Parse every input and combine them into a single tag list, first occurrence wins."""
    merged = TagList(config=config)
    for result in parse_inputs(inputs, config):
        merged = merged + result.tags
    return merged
