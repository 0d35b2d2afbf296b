"""
Result reporters.

- TextReporter: plain text for logs and CI
- RichReporter: colored tree for terminals
"""

from bddrunner.reporting.base import Reporter, summary_line
from bddrunner.reporting.rich_reporter import RichReporter
from bddrunner.reporting.text_reporter import TextReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "TextReporter",
    "summary_line",
]
