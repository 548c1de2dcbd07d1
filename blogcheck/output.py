"""Standardized terminal output utilities.

All user-facing messages go through these functions so every stage reports
with the same prefixes and colors.

Usage:
    from blogcheck.output import banner, error, info, success, warn

    banner("Validation Summary")
    success("Validated 12 blog post(s)")
    info("Validating promotions.json...")
    warn('Post #3 (ID: 3): Duplicate title detected: "Hello"')
    error('Post #4 (ID: 4): Missing required field "date"')

Errors and warnings go to stderr by default; everything else to stdout.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

# ANSI color codes via click's style system
_STYLES = {
    "success": {"fg": "green"},
    "info": {"fg": "cyan"},
    "warn": {"fg": "yellow"},
    "error": {"fg": "red"},
    "banner": {"fg": "blue"},
}

_PREFIXES = {
    "success": "✅",  # white heavy check mark
    "info": "ℹ️ ",  # information source
    "warn": "⚠️  WARNING:",  # warning sign
    "error": "❌ ERROR:",  # cross mark
}

BANNER_WIDTH = 60


def _output(
    message: str,
    style: str,
    *,
    file: TextIO | None = None,
    nl: bool = True,
) -> None:
    """Internal helper for styled output.

    Args:
        message: The message to display.
        style: The style name (success, error, info, warn).
        file: File to write to.
        nl: Whether to print a newline after the message.
    """
    prefix = _PREFIXES[style]
    fg_color = _STYLES[style]["fg"]
    click.echo(click.style(f"{prefix} {message}", fg=fg_color), file=file, nl=nl)


def success(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a success message with a green check mark.

    Example:
        >>> success("Validated 3 blog post(s)")
        ✅ Validated 3 blog post(s)
    """
    _output(message, "success", file=file, nl=nl)


def info(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an informational message in cyan.

    Example:
        >>> info("Validating blog-posts.json...")
        ℹ️  Validating blog-posts.json...
    """
    _output(message, "info", file=file, nl=nl)


def warn(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a warning in yellow (default: stderr).

    Example:
        >>> warn('Expected file "public/favicon.ico" not found')
        ⚠️  WARNING: Expected file "public/favicon.ico" not found
    """
    _output(message, "warn", file=file or sys.stderr, nl=nl)


def error(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an error in red (default: stderr).

    Example:
        >>> error("promotions.json file not found")
        ❌ ERROR: promotions.json file not found
    """
    _output(message, "error", file=file or sys.stderr, nl=nl)


def banner(title: str, *, file: TextIO | None = None) -> None:
    """Print a section title framed by rules, in blue."""
    rule = click.style("=" * BANNER_WIDTH, fg=_STYLES["banner"]["fg"])
    click.echo(rule, file=file)
    click.echo(click.style(f"   {title}", fg=_STYLES["banner"]["fg"]), file=file)
    click.echo(rule, file=file)


def plain(message: str = "", *, fg: str | None = None, file: TextIO | None = None) -> None:
    """Print an unprefixed line, optionally colored."""
    click.echo(click.style(message, fg=fg) if fg else message, file=file)
