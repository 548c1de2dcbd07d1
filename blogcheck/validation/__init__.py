"""Content validation for the blog data files.

This module provides the public API for validating a content root:
- run_validation(): Run every stage and return a report
- DiagnosticCollector: Ordered, echoing log of findings
- ValidationReport: Aggregate of one run, with its Outcome
"""

from blogcheck.validation.results import (
    Diagnostic,
    DiagnosticCollector,
    Outcome,
    Severity,
    ValidationReport,
)
from blogcheck.validation.runner import run_validation

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "Outcome",
    "Severity",
    "ValidationReport",
    "run_validation",
]
