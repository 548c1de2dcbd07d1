"""blogcheck CLI - validate blog content before deployment.

The CLI is a thin wrapper around the validation API (see validation/runner.py).
All checks live in the library; the CLI handles display and the exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click

from blogcheck.config import load_settings
from blogcheck.errors import BlogcheckError, ConfigError, ContentRootNotFoundError
from blogcheck.json_output import abort_payload, dumps, report_payload
from blogcheck.output import banner, error, plain, success
from blogcheck.validation import DiagnosticCollector, Outcome, ValidationReport, run_validation

TITLE = "Blog Content Validation"


def _print_summary(report: ValidationReport) -> None:
    """Print the closing banner, counts and verdict."""
    plain()
    banner("Validation Summary")
    plain()

    outcome = report.outcome
    if outcome is Outcome.CLEAN:
        success("All validation checks passed! ✨")
        plain("Your content is ready to deploy.", fg="green")
        plain()
        return

    if report.errors:
        plain(f"Found {len(report.errors)} error(s)", fg="red")
    if report.warnings:
        plain(f"Found {len(report.warnings)} warning(s)", fg="yellow")
    plain()

    if outcome is Outcome.FAIL:
        plain("❌ Validation FAILED - Please fix the errors before deploying.", fg="red")
    else:
        plain(
            "⚠️  Validation passed with warnings - Review warnings before deploying.",
            fg="yellow",
        )
    plain()


def _abort(err: BlogcheckError, json_output: bool) -> NoReturn:
    """Report an error that stops the run before validation, then exit 1."""
    if json_output:
        click.echo(dumps(abort_payload(err)))
    else:
        error(err.message)
    raise SystemExit(1) from err


@click.command()
@click.version_option(package_name="blogcheck")
@click.argument("root", type=click.Path(path_type=Path), default=".")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr")
def cli(root: Path, json_output: bool, verbose: bool) -> None:
    """Validate blog-posts.json, promotions.json and public assets.

    ROOT is the content directory holding the JSON files (default: current directory).

    Exits 0 when content is clean or has only warnings, 1 on any error.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not root.is_dir():
        _abort(ContentRootNotFoundError(str(root)), json_output)

    try:
        settings = load_settings(root)
    except ConfigError as e:
        _abort(e, json_output)

    if json_output:
        report = run_validation(root, settings=settings, collector=DiagnosticCollector(echo=False))
        click.echo(dumps(report_payload(report)))
    else:
        plain()
        banner(TITLE)
        plain()
        report = run_validation(root, settings=settings)
        _print_summary(report)

    if report.exit_code:
        raise SystemExit(report.exit_code)
