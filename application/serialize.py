"""Rendering of tagging results for the command line."""

import json

from application.constants import INPUT_KEY, OUTPUT_KEY, SOURCE_KEY, TAGS_KEY
from application.tagging import ParseResult
from domain.tags import TagList
from infrastructure.config import OutputFormat


def render_parse_results(results: list[ParseResult], output_format: OutputFormat) -> str:
    """
    Render parse results.

    text: one tag per line, a blank line between inputs.
    json: list of {source, input, tags, output} records.
    """
    if output_format is OutputFormat.JSON:
        records = [
            {
                SOURCE_KEY: r.source,
                INPUT_KEY: r.raw,
                TAGS_KEY: r.tags.to_list(),
                OUTPUT_KEY: r.serialized,
            }
            for r in results
        ]
        return json.dumps(records, ensure_ascii=False, indent=2)

    return "\n\n".join("\n".join(r.tags) for r in results)


def render_tag_list(tags: TagList, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.JSON:
        return json.dumps({TAGS_KEY: tags.to_list(), OUTPUT_KEY: tags.serialize()}, ensure_ascii=False, indent=2)
    return tags.serialize()


def render_formatted(output: str, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.JSON:
        return json.dumps({OUTPUT_KEY: output}, ensure_ascii=False)
    return output
