"""blogcheck - Validate blog posts, promotions and assets before deployment."""

from blogcheck.cli import cli
from blogcheck.validation import Outcome, ValidationReport, run_validation

__all__ = [
    "Outcome",
    "ValidationReport",
    "cli",
    "run_validation",
]
