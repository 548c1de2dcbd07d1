"""Validation driver that runs every stage against a content root."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from blogcheck.config import Settings
from blogcheck.validation.assets import validate_assets
from blogcheck.validation.posts import validate_posts
from blogcheck.validation.promotions import validate_promotions
from blogcheck.validation.results import DiagnosticCollector, ValidationReport

logger = logging.getLogger(__name__)


def run_validation(
    root: Path,
    *,
    settings: Settings | None = None,
    collector: DiagnosticCollector | None = None,
    today: date | None = None,
) -> ValidationReport:
    """Validate posts, promotions and assets, in that order.

    Each stage runs to completion whatever the previous ones found, so a
    single run reports every problem.

    Args:
        root: Content root directory.
        settings: Validator settings (defaults if None).
        collector: Diagnostic sink. A fresh echoing collector if None.
        today: Reference day for date checks (defaults to today).

    Returns:
        ValidationReport with every diagnostic, in the order found.
    """
    settings = settings or Settings()
    collector = collector or DiagnosticCollector()
    today = today or date.today()

    logger.debug("Validating content root %s", root)

    with collector.stage("posts"):
        posts = validate_posts(root, collector, settings, today=today)

    with collector.stage("promotions"):
        validate_promotions(root, collector, settings, today=today)

    with collector.stage("assets"):
        validate_assets(root, posts, collector, settings)

    report = ValidationReport(diagnostics=list(collector.diagnostics))
    logger.debug(
        "Validation finished: %d error(s), %d warning(s), outcome=%s",
        len(report.errors),
        len(report.warnings),
        report.outcome.value,
    )
    return report
