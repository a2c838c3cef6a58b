"""
CLI entrypoint for tag list parsing and formatting.

This script performs the following steps:
- loads .env (if present) and the tagging YAML config (if present)
- applies TAGLIST_* environment overrides and CLI flags
- configures logging
- reads tag strings from arguments, an input file, or stdin
- parses / formats / merges them and prints the result (text or JSON)
"""

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from application import (
    format_tags,
    merge_inputs,
    parse_inputs,
    render_formatted,
    render_parse_results,
    render_tag_list,
)
from application.constants import ARGV_SOURCE, STDIN_SOURCE
from infrastructure.config import LOG_LEVELS, OutputFormat, RunConfig, load_run_config
from infrastructure.constants import ENV_FILE, TAGGING_FILE
from infrastructure.io import ensure_exists, iter_lines
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taglist", description="Parse and format delimited tag lists")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to tagging YAML (default: {TAGGING_FILE} when it exists)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=str(ENV_FILE),
        help=f"Path to .env file, loaded when present (default: {ENV_FILE})",
    )
    p.add_argument(
        "--delimiter",
        action="append",
        default=None,
        help="Tag delimiter; repeat to allow several alternative delimiters",
    )
    p.add_argument("--glue", type=str, default=None, help="String used to join tags when formatting")
    p.add_argument(
        "--lowercase",
        action="store_true",
        default=None,
        help="Force tags to lowercase",
    )
    p.add_argument(
        "--parameterize",
        action="store_true",
        default=None,
        help="Force tags to URL-safe slugs",
    )
    p.add_argument(
        "--delimiter-is-pattern",
        action="store_true",
        default=None,
        help="Treat delimiters as regular expressions instead of literal strings",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=list(LOG_LEVELS),
        help="Console log level (default: WARNING)",
    )
    p.add_argument("--log-file", type=str, default=None, help="Optional rotating log file")

    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text, item_help in (
        ("parse", "Parse each tag string into a normalized tag list", "Raw tag strings"),
        ("merge", "Parse all tag strings and merge them into one tag list", "Raw tag strings"),
        ("format", "Serialize tag names into a single editable tag string", "Tag names, taken verbatim"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("items", nargs="*", help=item_help)
        sp.add_argument(
            "--input",
            type=str,
            default=None,
            help="Read one item per line from this file ('-' for stdin)",
        )

    return p


def _iter_inputs(args: argparse.Namespace) -> Iterator[tuple[str, str]]:
    """Yield (source, text) pairs from positional items, then --input (or stdin when nothing else)."""
    for i, item in enumerate(args.items, start=1):
        yield f"{ARGV_SOURCE}[{i}]", item

    if args.input == "-" or (args.input is None and not args.items and not sys.stdin.isatty()):
        for lineno, line in enumerate(sys.stdin, start=1):
            line = line.rstrip("\r\n")
            if line.strip():
                yield f"{STDIN_SOURCE}:{lineno}", line
    elif args.input is not None:
        path = Path(args.input)
        for lineno, line in iter_lines(path):
            yield f"{path.name}:{lineno}", line


def _resolve_config(args: argparse.Namespace) -> RunConfig:
    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    if args.config is not None:
        config_path: Path | None = Path(args.config)
        ensure_exists(config_path, "tagging config")
    else:
        config_path = TAGGING_FILE if TAGGING_FILE.exists() else None

    delimiter = args.delimiter
    if delimiter is not None and len(delimiter) == 1:
        delimiter = delimiter[0]

    return load_run_config(
        config_path,
        overrides={
            "delimiter": delimiter,
            "glue": args.glue,
            "force_lowercase": args.lowercase,
            "force_parameterize": args.parameterize,
            "delimiter_is_pattern": args.delimiter_is_pattern,
            "output_format": args.output_format,
            "console_level": args.console_level,
            "log_file": args.log_file,
        },
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = _resolve_config(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"taglist: configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(
        log_file=cfg.log_file,
        console_level=getattr(logging, cfg.console_level),
        file_level=getattr(logging, cfg.file_level),
    )
    logger.info(
        "Starting %s (delimiter=%r, lowercase=%s, parameterize=%s)",
        args.command,
        cfg.tagging.delimiter,
        cfg.tagging.force_lowercase,
        cfg.tagging.force_parameterize,
    )

    try:
        inputs = list(_iter_inputs(args))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read input: %s", e)
        return EXIT_RUNTIME_ERROR

    if args.command == "parse":
        output = render_parse_results(parse_inputs(inputs, cfg.tagging), cfg.output_format)
    elif args.command == "merge":
        output = render_tag_list(merge_inputs(inputs, cfg.tagging), cfg.output_format)
    else:
        output = render_formatted(format_tags((text for _, text in inputs), cfg.tagging), cfg.output_format)

    if output:
        print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
