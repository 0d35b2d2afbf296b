"""
Recursive walk over suite nodes.

For each suite: push its hook scope, run its beforeAll hooks, run its
children (tests through the NodeRunner, suites recursively), run its
afterAll hooks and pop the scope. A failed beforeAll skips the suite's
children but never its afterAll hooks, and never affects sibling suites.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import bddrunner.constants as constants
import bddrunner.hooks.lifecycle as lifecycle
import bddrunner.hooks.phases as phases
import bddrunner.runner.invoker as invoker
import bddrunner.runner.node_runner as node_runner

if _typing.TYPE_CHECKING:
    import bddrunner.plan.node as plan_node
    import bddrunner.session.base as session_base

_logger = _logging.getLogger(__name__)


class PlanWalker:
    """
    Walks a plan tree and reports every node to the session.
    """

    def __init__(
        self,
        session: session_base.Session,
        lifecycle_hooks: lifecycle.LifecycleHooks,
        protected_invoker: invoker.ProtectedInvoker,
        runner: node_runner.NodeRunner | None = None,
    ) -> None:
        self._session = session
        self._hooks = lifecycle_hooks
        self._invoker = protected_invoker
        self._node_runner = runner or node_runner.NodeRunner(protected_invoker, lifecycle_hooks)

    def run_suite(self, node: plan_node.PlanNode) -> None:
        """Run node's suite-level hooks and all of its children."""
        with self._hooks.scope(node):
            halted = self._run_suite_hooks(phases.HookPhase.SETUP_ALL)

            if halted:
                _logger.debug("beforeAll failed in %r; skipping its children", node.phrase)
            else:
                for child in node.children:
                    if child.is_test:
                        self._run_test(child)
                    elif child.is_suite:
                        self._run_child_suite(child)

            self._run_suite_hooks(phases.HookPhase.TEARDOWN_ALL)

    def _run_suite_hooks(self, phase: phases.HookPhase) -> bool:
        """
        Run every hook of a suite-level phase.

        Each failure is recorded as a dummy error named after the phase.
        All hooks of the phase run even after one fails.

        Returns:
            True if any hook failed.
        """
        failed = False
        for hook in self._hooks.get_hooks(phase):
            outcome = self._invoker.invoke(hook, message_prefix=phase.message_prefix)
            if not outcome.success:
                self._session.add_dummy_error(phase.phrase, outcome.error or "")
                failed = True
        return failed

    def _run_test(self, node: plan_node.PlanNode) -> None:
        self._session.push_node(node)
        try:
            if self._session.should_skip():
                self._session.set_skipped()
                return

            result = self._node_runner.run(node)
            if result.success:
                self._session.set_success()
            else:
                self._session.set_error(result.error or "")
        finally:
            self._session.pop_node()

    def _run_child_suite(self, node: plan_node.PlanNode) -> None:
        self._session.push_node(node)
        try:
            if node.load_error is not None:
                self._session.set_error(constants.PLANNING_ERROR_PREFIX + node.load_error)
                return

            self.run_suite(node)
            self._session.set_status_from_children()
        finally:
            self._session.pop_node()
