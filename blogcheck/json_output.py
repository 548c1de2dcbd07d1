"""Machine-readable report for ``blogcheck --json``.

A finished run is serialized from its ValidationReport, so scripts see the
same diagnostics, stages and outcome as the terminal report::

    {
        "success": false,
        "command": "validate",
        "outcome": "fail",
        "counts": {"error": 1, "warning": 0, "info": 2},
        "diagnostics": [
            {"severity": "error", "message": "...", "stage": "posts"},
            ...
        ],
        "errors": [ ... ]  # error diagnostics only; present when success=false
    }

A run that stops before validation (missing content root, bad config) has
no diagnostics; its ``errors`` holds the coded BlogcheckError instead.
"""

from __future__ import annotations

import json
from typing import Any

from blogcheck.errors import BlogcheckError
from blogcheck.validation.results import Outcome, Severity, ValidationReport

COMMAND = "validate"


def severity_counts(report: ValidationReport) -> dict[str, int]:
    """Number of diagnostics per severity, every severity listed."""
    counts = {severity.value: 0 for severity in Severity}
    for diagnostic in report.diagnostics:
        counts[diagnostic.severity.value] += 1
    return counts


def report_payload(report: ValidationReport) -> dict[str, Any]:
    """Build the JSON document for a completed validation run."""
    payload: dict[str, Any] = {
        "success": report.passed,
        "command": COMMAND,
        "outcome": report.outcome.value,
        "counts": severity_counts(report),
        "diagnostics": [d.to_dict() for d in report.diagnostics],
    }
    if not report.passed:
        payload["errors"] = [d.to_dict() for d in report.errors]
    return payload


def abort_payload(error: BlogcheckError) -> dict[str, Any]:
    """Build the JSON document for a run stopped by ``error``."""
    return {
        "success": False,
        "command": COMMAND,
        "outcome": Outcome.FAIL.value,
        "errors": [error.to_dict()],
    }


def dumps(payload: dict[str, Any], *, indent: int | None = 2) -> str:
    """Serialize a payload, keeping non-ASCII text readable.

    Config values echoed in error context may be YAML dates, so anything
    json cannot encode is written as its string form.
    """
    return json.dumps(payload, indent=indent, ensure_ascii=False, default=str)
