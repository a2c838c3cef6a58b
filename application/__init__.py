"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the parse/format workflows behind the command line tool.
"""

from application.serialize import render_formatted, render_parse_results, render_tag_list
from application.tagging import ParseResult, format_tags, merge_inputs, parse_inputs

__all__ = [
    # Main workflows
    "parse_inputs",
    "format_tags",
    "merge_inputs",
    "ParseResult",
    # Rendering
    "render_parse_results",
    "render_tag_list",
    "render_formatted",
]
