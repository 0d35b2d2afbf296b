"""
Rich console reporter.

Shows the results as a colored tree, followed by the totals and one panel
per error, using the Rich library.
"""

from __future__ import annotations

import rich.console as _rich_console
import rich.panel as _rich_panel
import rich.text as _rich_text
import rich.tree as _rich_tree

import bddrunner.reporting.base as base
import bddrunner.session.results as results

_STATUS_STYLES: dict[results.TestStatus | None, tuple[str, str]] = {
    results.TestStatus.SUCCESS: ("✓", "green"),
    results.TestStatus.FAILURE: ("✗", "bold red"),
    results.TestStatus.SKIPPED: ("○", "yellow"),
}


class RichReporter(base.Reporter):
    """
    Reporter with colors and panels.
    """

    def __init__(
        self,
        console: _rich_console.Console | None = None,
        *,
        no_color: bool = False,
        show_skipped: bool = True,
        show_tracebacks: bool = True,
    ) -> None:
        """
        Initialize the Rich reporter.

        Args:
            console: Rich Console instance (created if not provided).
            no_color: Disable all colors.
            show_skipped: Include skipped tests in the tree.
            show_tracebacks: Print one panel per error after the summary.
        """
        super().__init__(show_skipped=show_skipped, show_tracebacks=show_tracebacks)
        self._console = console or _rich_console.Console(no_color=no_color)

    def _label(self, node: results.ResultNode) -> _rich_text.Text:
        symbol, style = _STATUS_STYLES.get(node.status, ("?", "dim"))
        label = _rich_text.Text(f"{symbol} ", style=style)
        label.append(node.phrase, style="italic" if node.synthetic else "")
        return label

    def build_tree(self, run_results: results.TestResults) -> _rich_tree.Tree:
        root = _rich_tree.Tree("[bold]Test results[/bold]")

        def add(parent: _rich_tree.Tree, nodes: list[results.ResultNode]) -> None:
            for node in nodes:
                if not self._show_skipped and node.status is results.TestStatus.SKIPPED:
                    continue
                branch = parent.add(self._label(node))
                add(branch, node.children)

        add(root, run_results.children)
        return root

    def report(self, run_results: results.TestResults) -> None:
        self._console.print(self.build_tree(run_results))

        style = "bold red" if run_results.failed else "bold green"
        self._console.print(_rich_text.Text(base.summary_line(run_results), style=style))

        if self._show_tracebacks:
            for index, error in enumerate(run_results.errors, start=1):
                self._console.print(
                    _rich_panel.Panel(
                        _rich_text.Text(error),
                        title=f"[bold red]Error {index}[/bold red]",
                        border_style="red",
                    )
                )
