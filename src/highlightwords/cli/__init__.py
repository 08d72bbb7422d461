#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for highlightwords.

Reads text from a file, the ``--text`` flag or standard input, highlights the
given search terms and prints the result as marked text, JSON chunks, HTML or
styled terminal output.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from highlightwords import __version__
from highlightwords.chunks import find_chunks
from highlightwords.cli.config import load_config_with_priority
from highlightwords.constants import CONFIG_ENV_VAR, DEFAULT_OUTPUT_FORMAT
from highlightwords.exceptions import (
    ConfigurationError,
    HighlightWordsError,
    InputDecodeError,
    InvalidSearchTermError,
    ValidationError,
)
from highlightwords.logging_utils import configure_logging, resolve_log_level
from highlightwords.options import HighlightOptions, HtmlRenderOptions
from highlightwords.renderers import HtmlHighlightRenderer, MarkerRenderer, RichHighlightRenderer
from highlightwords.sanitizers import available_sanitizers
from highlightwords.types import Chunk, SearchWord

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

OUTPUT_FORMATS = ("text", "json", "html", "rich")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``highlightwords`` command."""
    parser = argparse.ArgumentParser(
        prog="highlightwords",
        description="Highlight occurrences of search terms in text.",
    )
    parser.add_argument("terms", nargs="*", metavar="TERM", help="Search term (a regular expression unless --auto-escape)")
    parser.add_argument(
        "--regex",
        "-e",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Regular expression term, never escaped (repeatable)",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", "-i", metavar="FILE", help="Read text from FILE instead of standard input")
    source.add_argument("--text", "-t", help="Text to highlight")

    matching = parser.add_argument_group("matching options")
    matching.add_argument(
        "--case-sensitive",
        action="store_true",
        default=None,
        help="Match case exactly (default: case-insensitive)",
    )
    matching.add_argument(
        "--auto-escape",
        action="store_true",
        default=None,
        help="Treat TERM values as literal text rather than regular expressions",
    )
    matching.add_argument(
        "--sanitize",
        action="append",
        default=None,
        metavar="NAME",
        help=f"Sanitizer applied before matching (repeatable): {', '.join(available_sanitizers())}",
    )

    output = parser.add_argument_group("output options")
    output.add_argument("--format", "-f", choices=OUTPUT_FORMATS, default=None, help="Output format (default: text)")
    output.add_argument(
        "--active-index",
        type=int,
        default=None,
        metavar="N",
        help="Mark the N-th highlighted chunk (0-based) as active in html and rich output",
    )

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", metavar="PATH", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovery)")
    config.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", metavar="PATH", help="Also write log records to PATH")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from --log-level, --verbose, --trace and --log-file."""
    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, (ValidationError, ConfigurationError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, (InputDecodeError, OSError)):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))


def _pick(cli_value: Any, config: Dict[str, Any], key: str, default: Any) -> Any:
    """Return the CLI value when given, else the config value, else ``default``."""
    if cli_value is not None:
        return cli_value
    return config.get(key, default)


def _pick_bool(cli_value: bool | None, config: Dict[str, Any], key: str) -> bool:
    """Return a boolean setting, rejecting config values that are not true booleans."""
    value = _pick(cli_value, config, key, False)
    if not isinstance(value, bool):
        raise ValidationError(
            f"Configuration key '{key}' must be true or false, got {value!r}",
            parameter_name=key,
            parameter_value=value,
        )
    return value


def build_highlight_options(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> HighlightOptions:
    """Combine command-line flags and configuration into ``HighlightOptions``."""
    sanitize = _pick(parsed_args.sanitize, config, "sanitize", None)
    if isinstance(sanitize, list):
        sanitize = tuple(sanitize) or None
    return HighlightOptions(
        case_sensitive=_pick_bool(parsed_args.case_sensitive, config, "case_sensitive"),
        auto_escape=_pick_bool(parsed_args.auto_escape, config, "auto_escape"),
        sanitize=sanitize,
    )


def build_html_options(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> HtmlRenderOptions:
    """Build ``HtmlRenderOptions`` from the ``html`` config table and ``--active-index``."""
    html_config = config.get("html") or {}
    if not isinstance(html_config, dict):
        raise ValidationError("The 'html' configuration entry must be a table", parameter_name="html")
    options = HtmlRenderOptions().create_updated(**html_config)
    active_index = _pick(parsed_args.active_index, config, "active_index", options.active_index)
    return options.create_updated(active_index=int(active_index))


def collect_search_words(parsed_args: argparse.Namespace) -> List[SearchWord]:
    """Return positional terms followed by compiled ``--regex`` patterns."""
    words: List[SearchWord] = list(parsed_args.terms)
    for pattern in parsed_args.regex:
        try:
            words.append(re.compile(pattern))
        except re.error as e:
            raise InvalidSearchTermError(pattern, original_error=e) from e
    return words


def read_input_text(parsed_args: argparse.Namespace) -> str:
    """Return the text to highlight from ``--text``, ``--input`` or stdin.

    Raises
    ------
    InputDecodeError
        If the file or stdin is not valid UTF-8

    """
    if parsed_args.text is not None:
        return parsed_args.text
    if parsed_args.input and parsed_args.input != "-":
        source = parsed_args.input
        try:
            return Path(source).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InputDecodeError(source, original_error=e) from e
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        raise InputDecodeError("<stdin>", original_error=e) from e


def format_json(chunks: Sequence[Chunk], text: str) -> str:
    """Serialize chunks with their text as a JSON array."""
    payload = [{**chunk.to_dict(), "text": chunk.text_of(text)} for chunk in chunks]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _write(output: str) -> None:
    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")


def render_output(
    output_format: str,
    chunks: Sequence[Chunk],
    text: str,
    options: HighlightOptions,
    html_options: HtmlRenderOptions,
) -> None:
    """Render chunks in the requested format and write them to stdout."""
    if output_format == "json":
        _write(format_json(chunks, text))
    elif output_format == "html":
        _write(HtmlHighlightRenderer(options, html_options).render_chunks(chunks, text))
    elif output_format == "rich":
        from rich.console import Console

        renderer = RichHighlightRenderer(options, active_index=html_options.active_index)
        Console().print(renderer.render_chunks(chunks, text), highlight=False, markup=False)
    else:
        _write(MarkerRenderer(options).render_chunks(chunks, text))


def main(args: list[str] | None = None) -> int:
    """Execute the highlightwords command-line entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = _load_config(parsed_args)
        options = build_highlight_options(parsed_args, config)
        html_options = build_html_options(parsed_args, config)
        output_format = _pick(parsed_args.format, config, "format", DEFAULT_OUTPUT_FORMAT)
        if output_format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Unknown output format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
                parameter_name="format",
                parameter_value=output_format,
            )

        search_words = collect_search_words(parsed_args)
        text = read_input_text(parsed_args)
        chunks = find_chunks(search_words, text, options)
        logger.info(
            "Highlighted %d chunk(s) for %d search term(s)",
            sum(1 for chunk in chunks if chunk.highlight),
            len(search_words),
        )
        render_output(output_format, chunks, text, options, html_options)
    except HighlightWordsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


__all__ = ["main", "create_parser", "get_exit_code_for_exception"]

if __name__ == "__main__":
    sys.exit(main())
