"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2jsx/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import TextIO

from html2jsx.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available."""
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the ``--rich`` flag is set, output goes to the
    terminal rather than a file, and either ``--force-rich`` is set or the
    stream is a TTY.

    Raises
    ------
    DependencyError
        If ``--rich`` is requested but Rich is not installed

    """
    if not args.rich or args.out:
        return False

    if not check_rich_available():
        raise DependencyError(
            "rich-output",
            missing_packages=["rich"],
            message="Rich output requires the optional 'rich' dependency. Install with: pip install html2jsx[rich]",
        )

    if args.force_rich:
        return True

    isatty = getattr(stream or sys.stdout, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rich_jsx(jsx: str) -> None:
    """Print JSX with syntax highlighting."""
    from rich.console import Console
    from rich.syntax import Syntax

    Console().print(Syntax(jsx, "jsx", theme="monokai", background_color="default"))


def write_output(jsx: str, out_path: Path | None, stream: TextIO | None = None) -> None:
    """Write JSX to ``out_path``, or to ``stream`` (stdout) when no path is given."""
    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(jsx, encoding="utf-8")
        return
    (stream or sys.stdout).write(jsx)
