"""
Plain text reporter.

Writes the results tree with status symbols, the totals and every error
to a text stream. Suitable for logs and CI output.
"""

from __future__ import annotations

import sys as _sys
import typing as _typing

import bddrunner.reporting.base as base
import bddrunner.session.results as results

_STATUS_SYMBOLS: dict[results.TestStatus | None, str] = {
    results.TestStatus.SUCCESS: "+",
    results.TestStatus.FAILURE: "-",
    results.TestStatus.SKIPPED: "~",
}


class TextReporter(base.Reporter):
    """Reporter that writes plain text."""

    def __init__(
        self,
        stream: _typing.TextIO | None = None,
        *,
        show_skipped: bool = True,
        show_tracebacks: bool = True,
    ) -> None:
        super().__init__(show_skipped=show_skipped, show_tracebacks=show_tracebacks)
        self._stream = stream or _sys.stdout

    def render_tree(self, run_results: results.TestResults) -> str:
        lines: list[str] = []

        def add(node: results.ResultNode, depth: int) -> None:
            if not self._show_skipped and node.status is results.TestStatus.SKIPPED:
                return
            symbol = _STATUS_SYMBOLS.get(node.status, "?")
            lines.append(f"{'   ' * depth}[{symbol}] {node.phrase}")

        run_results.visit_all_nodes(add)
        return "\n".join(lines)

    def report(self, run_results: results.TestResults) -> None:
        write = self._stream.write
        write("Test results:\n")
        tree = self.render_tree(run_results)
        if tree:
            write(tree + "\n")
        write(base.summary_line(run_results) + "\n")

        if self._show_tracebacks and run_results.errors:
            write("\nErrors reported by tests:\n")
            for error in run_results.errors:
                write("\n" + error + "\n")
