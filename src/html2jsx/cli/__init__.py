"""Command-line interface for the html2jsx converter.

Reads an HTML fragment from a file or standard input and writes the JSX
equivalent to a file or standard output.

Configuration Files
-------------------
Defaults for ``indent`` and ``parser`` may be stored in ``.html2jsx.toml``,
``.html2jsx.yaml``, ``.html2jsx.json`` or the ``[tool.html2jsx]`` table of
``pyproject.toml``, discovered from the current directory upwards. The
``HTML2JSX_CONFIG`` environment variable or ``--config`` select a file
explicitly. Command-line flags always override configuration values.

Examples
--------
Convert a file::

    $ html2jsx snippet.html

Convert standard input with four-space indentation::

    $ echo '<div class="x">hi</div>' | html2jsx --indent 4

Write to a file::

    $ html2jsx snippet.html --out Snippet.jsx

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from html2jsx.cli.config import load_config_with_priority
from html2jsx.cli.output import print_rich_jsx, should_use_rich_output, write_output
from html2jsx.constants import (
    CONFIG_ENV_VAR,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    SUPPORTED_PARSERS,
)
from html2jsx.converter import HtmlToJsx
from html2jsx.exceptions import ConfigError, DependencyError, Html2JsxError, ParsingError, ValidationError
from html2jsx.logging_utils import configure_logging
from html2jsx.options import JsxOptions

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``html2jsx`` command."""
    parser = argparse.ArgumentParser(
        prog="html2jsx",
        description="Convert an HTML fragment to JSX.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input HTML file, or '-' to read standard input (default)",
    )
    parser.add_argument("--out", "-o", type=Path, help="Write JSX to this file instead of standard output")

    indent_group = parser.add_mutually_exclusive_group()
    indent_group.add_argument("--indent", type=int, metavar="N", help="Indent with N spaces per level (default: 2)")
    indent_group.add_argument("--tabs", action="store_true", help="Indent with one tab per level")

    parser.add_argument("--parser", choices=SUPPORTED_PARSERS, help="BeautifulSoup parser backend")
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovered)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    parser.add_argument("--rich", action="store_true", help="Syntax-highlight the JSX when writing to a terminal")
    parser.add_argument("--force-rich", action="store_true", help="Use rich output even when not writing to a TTY")

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _normalize_indent(value: Any) -> Any:
    """Accept a number of spaces as well as a literal indent string."""
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 1:
            raise ValidationError(
                f"indent must be at least 1 space, got {value}", parameter_name="indent", parameter_value=value
            )
        return " " * value
    return value


def build_options(parsed_args: argparse.Namespace) -> JsxOptions:
    """Merge configuration file values and command-line flags into options.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    JsxOptions
        Options with CLI flags taking precedence over configuration values

    """
    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        config = dict(load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR)))

    if "indent" in config:
        config["indent"] = _normalize_indent(config["indent"])
    if parsed_args.tabs:
        config["indent"] = "\t"
    elif parsed_args.indent is not None:
        config["indent"] = _normalize_indent(parsed_args.indent)
    if parsed_args.parser:
        config["parser"] = parsed_args.parser

    return JsxOptions.from_mapping(config)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(args: list[str] | None = None) -> int:
    """Execute the ``html2jsx`` command.

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
        use_rich = should_use_rich_output(parsed_args)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except DependencyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR

    try:
        html = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        jsx = HtmlToJsx(options).convert(html)
    except DependencyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ParsingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except Html2JsxError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if use_rich:
        print_rich_jsx(jsx)
        return EXIT_SUCCESS

    try:
        write_output(jsx, parsed_args.out)
    except OSError as e:
        print(f"Error: cannot write {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    logger.info("Converted %s", parsed_args.input if parsed_args.input != "-" else "standard input")
    return EXIT_SUCCESS


__all__ = ["build_options", "create_parser", "main"]
