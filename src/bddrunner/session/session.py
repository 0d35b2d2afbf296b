"""
Test session implementation.

TestSession holds the state of one run while the runner walks the plan:
the stack of result nodes for the current path, a matching stack of
shared contexts and expectation contexts, and the skip/focus policy.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import bddrunner.exceptions as exceptions
import bddrunner.expect.context as expect_context
import bddrunner.plan.node as plan_node
import bddrunner.session.base as base
import bddrunner.session.context as node_context
import bddrunner.session.results as results

if _typing.TYPE_CHECKING:
    import bddrunner.logging.run_logger as run_logger

_logger = _logging.getLogger(__name__)


class TestSession(base.Session):
    """
    Session that builds a TestResults tree.

    The root of the run has its own context and expectation context, so
    hooks declared on the plan root can use both before any node is
    pushed.
    """

    __test__ = False

    def __init__(
        self,
        plan: plan_node.TestPlan,
        *,
        has_focus_nodes: bool = False,
        run_logger: run_logger.RunLogger | None = None,
    ) -> None:
        self.results = results.TestResults(plan)
        self.has_focus_nodes = has_focus_nodes
        self._run_logger = run_logger
        self._node_stack: list[results.ResultNode] = []
        self._context_stack: list[node_context.NodeContext] = [node_context.NodeContext()]
        self._expectation_stack: list[expect_context.ExpectationContext] = [
            expect_context.ExpectationContext()
        ]
        self._finalized = False

        if self._run_logger is not None:
            self._run_logger.log_run_start(len(plan.children), has_focus_nodes)

    # =========================================================================
    # Node stack
    # =========================================================================

    @property
    def depth(self) -> int:
        """Number of result nodes currently pushed."""
        return len(self._node_stack)

    def _current(self, action: str) -> results.ResultNode:
        if not self._node_stack:
            raise exceptions.SessionStateError(f"Attempting to {action} on an empty node stack")
        return self._node_stack[-1]

    def get_full_name(self) -> str:
        """Phrases of the current path joined with spaces."""
        return " ".join(node.phrase for node in self._node_stack)

    def push_node(self, node: plan_node.PlanNode) -> None:
        self._push_result(results.ResultNode(plan_node=node))

    def _push_result(self, result_node: results.ResultNode) -> None:
        siblings = self._node_stack[-1].children if self._node_stack else self.results.children
        siblings.append(result_node)
        self._node_stack.append(result_node)
        self._context_stack.append(node_context.NodeContext(self._context_stack[-1]))
        self._expectation_stack.append(
            expect_context.ExpectationContext(self._expectation_stack[-1])
        )

        if self._run_logger is not None:
            self._run_logger.log_node_start(
                self.get_full_name(),
                result_node.plan_node.kind.value,
            )

    def pop_node(self) -> None:
        if not self._node_stack:
            raise exceptions.SessionStateError("Tried to pop from an empty node stack")
        self._node_stack.pop()
        self._context_stack.pop()
        self._expectation_stack.pop()

    def get_context(self) -> node_context.NodeContext:
        return self._context_stack[-1]

    def get_expectation_context(self) -> expect_context.ExpectationContext:
        return self._expectation_stack[-1]

    # =========================================================================
    # Skip policy
    # =========================================================================

    def should_skip(self) -> bool:
        """
        Decide whether the current test runs.

        With focus nodes anywhere in the plan, only tests inside a focused
        node run, and a skip closer to the test still wins. Without focus
        nodes, a skip anywhere on the path skips the test.
        """
        if self.has_focus_nodes:
            for node in reversed(self._node_stack):
                modifier = node.plan_node.modifier
                if modifier is plan_node.NodeModifier.SKIP:
                    return True
                if modifier is plan_node.NodeModifier.FOCUS:
                    return False
            return True

        return any(
            node.plan_node.modifier is plan_node.NodeModifier.SKIP for node in self._node_stack
        )

    # =========================================================================
    # Outcomes
    # =========================================================================

    def _log_result(self, node: results.ResultNode, error: str | None = None) -> None:
        if self._run_logger is not None and node.status is not None:
            self._run_logger.log_node_result(self.get_full_name(), node.status.value, error)

    def set_success(self) -> None:
        node = self._current("set success status")
        node.status = results.TestStatus.SUCCESS
        self._log_result(node)

    def set_skipped(self) -> None:
        node = self._current("set skipped status")
        node.status = results.TestStatus.SKIPPED
        self._log_result(node)

    def set_error(self, message: str) -> None:
        node = self._current("set error status")
        node.status = results.TestStatus.FAILURE
        node.errors.append(message)
        self._log_result(node, message)

    def set_status_from_children(self) -> None:
        """
        Roll up the current suite's status.

        All children skipped (or no children) means skipped; any failed
        child means failure; anything else is success.
        """
        node = self._current("set status from children")
        status = results.TestStatus.SUCCESS
        skipped = True

        for child in node.children:
            if child.status is not results.TestStatus.SKIPPED:
                skipped = False
                if child.status is results.TestStatus.FAILURE:
                    status = results.TestStatus.FAILURE

        node.status = results.TestStatus.SKIPPED if skipped else status
        self._log_result(node)

    def add_dummy_error(self, phrase: str, message: str) -> None:
        """
        Record a beforeAll/afterAll failure.

        The error is attached to a synthetic suite named phrase under the
        current node, and the current node is marked failed.
        """
        parent_name = self.get_full_name()
        self._push_result(
            results.ResultNode(
                plan_node=plan_node.PlanNode(phrase=phrase, kind=plan_node.NodeType.SUITE),
                synthetic=True,
            )
        )
        try:
            self.set_error(message)
        finally:
            self.pop_node()

        if self._node_stack:
            self._node_stack[-1].status = results.TestStatus.FAILURE

        _logger.debug("Recorded %s error under %r", phrase, parent_name or "<root>")
        if self._run_logger is not None:
            self._run_logger.log_dummy_error(phrase, parent_name, message)

    # =========================================================================
    # Finalization
    # =========================================================================

    def finalize(self) -> results.TestResults:
        """
        Compute totals and gather errors.

        Raises:
            SessionStateError: If nodes are still on the stack.
        """
        if self._node_stack:
            raise exceptions.SessionStateError(
                "Cannot finalize TestResults with nodes still on the stack"
            )

        run_results = self.results
        if self._finalized:
            return run_results

        run_results.success_count = 0
        run_results.failure_count = 0
        run_results.skipped_count = 0
        run_results.errors = []

        def tally(node: results.ResultNode, _depth: int) -> None:
            if node.is_test:
                if node.status is results.TestStatus.SUCCESS:
                    run_results.success_count += 1
                elif node.status is results.TestStatus.FAILURE:
                    run_results.failure_count += 1
                elif node.status is results.TestStatus.SKIPPED:
                    run_results.skipped_count += 1
            run_results.errors.extend(node.errors)

        run_results.visit_all_nodes(tally)
        self._finalized = True

        if self._run_logger is not None:
            self._run_logger.log_run_end(
                run_results.success_count,
                run_results.failure_count,
                run_results.skipped_count,
                len(run_results.errors),
            )

        return run_results
