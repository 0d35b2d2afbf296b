"""
Base class for result reporters.
"""

from __future__ import annotations

import abc as _abc
import typing as _typing

if _typing.TYPE_CHECKING:
    import bddrunner.session.results as results


def summary_line(run_results: results.TestResults) -> str:
    """One-line totals for a run."""
    line = (
        f"{run_results.success_count} passed, "
        f"{run_results.failure_count} failed, "
        f"{run_results.skipped_count} skipped"
    )
    if run_results.errors:
        line += f", {len(run_results.errors)} errors"
    return line


class Reporter(_abc.ABC):
    """
    Presents finalized TestResults to the user.
    """

    def __init__(
        self,
        *,
        show_skipped: bool = True,
        show_tracebacks: bool = True,
    ) -> None:
        """
        Initialize the reporter.

        Args:
            show_skipped: Include skipped tests in the tree.
            show_tracebacks: Print the full error text after the summary.
        """
        self._show_skipped = show_skipped
        self._show_tracebacks = show_tracebacks

    @_abc.abstractmethod
    def report(self, run_results: results.TestResults) -> None:
        """Present the results."""
        ...
