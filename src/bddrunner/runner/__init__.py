"""
The execution engine.

Example usage:
    from bddrunner.plan import PlanBuilder
    from bddrunner.runner import TestRunner

    builder = PlanBuilder()
    builder.describe("math", lambda s: s.it("adds", lambda env: env.expect(1 + 1).to.equal(2)))
    results = TestRunner.run_plan(builder.build())
    assert results.success_count == 1
"""

from bddrunner.runner.environment import (
    CallbackEnvironment,
    ExpectationFacade,
    is_test_running,
    running_test,
)
from bddrunner.runner.invoker import Outcome, ProtectedInvoker
from bddrunner.runner.node_runner import NodeResult, NodeRunner
from bddrunner.runner.test_runner import TestRunner
from bddrunner.runner.walker import PlanWalker

__all__ = [
    "CallbackEnvironment",
    "ExpectationFacade",
    "NodeResult",
    "NodeRunner",
    "Outcome",
    "PlanWalker",
    "ProtectedInvoker",
    "TestRunner",
    "is_test_running",
    "running_test",
]
