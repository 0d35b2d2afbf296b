"""
Running a single test node.

A test runs in four steps: beforeEach hooks, the wrapEach chain, the body,
then afterEach hooks. A failing beforeEach or wrapEach ends the test
without teardown. afterEach always runs once the body has been attempted,
and its first failure is combined with a failed body's error.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

import bddrunner.constants as constants
import bddrunner.hooks.lifecycle as lifecycle
import bddrunner.hooks.phases as phases
import bddrunner.runner.invoker as invoker

if _typing.TYPE_CHECKING:
    import bddrunner.plan.node as plan_node


@_dataclasses.dataclass(frozen=True)
class NodeResult:
    """Combined outcome of one test node."""

    success: bool
    error: str | None = None

    @classmethod
    def passed(cls) -> NodeResult:
        return cls(success=True)

    @classmethod
    def failure(cls, error: str | None) -> NodeResult:
        return cls(success=False, error=error or "")


def combine_cleanup_error(test_error: str, teardown_error: str) -> str:
    """Error for a failed body whose afterEach cleanup also failed."""
    return test_error + constants.CLEANUP_ERROR_SEPARATOR + teardown_error


def wrap_contract_error(value: _typing.Any) -> str:
    """Error for a wrapEach hook that did not return a callable."""
    return constants.WRAP_CONTRACT_MESSAGE + type(value).__name__


class NodeRunner:
    """Runs test nodes with the hooks of the current scope stack."""

    def __init__(
        self,
        protected_invoker: invoker.ProtectedInvoker,
        lifecycle_hooks: lifecycle.LifecycleHooks,
    ) -> None:
        self._invoker = protected_invoker
        self._hooks = lifecycle_hooks

    def run(self, node: plan_node.PlanNode) -> NodeResult:
        for hook in self._hooks.get_setup_each_hooks():
            outcome = self._invoker.invoke(
                hook,
                message_prefix=phases.HookPhase.SETUP_EACH.message_prefix,
            )
            if not outcome.success:
                return NodeResult.failure(outcome.error)

        callback: _typing.Callable[..., _typing.Any] | None = node.callback
        for hook in self._hooks.get_wrap_each_hooks():
            outcome = self._invoker.invoke(
                hook,
                args=(callback,),
                message_prefix=phases.HookPhase.WRAP_EACH.message_prefix,
            )
            if not outcome.success:
                return NodeResult.failure(outcome.error)
            if not callable(outcome.value):
                return NodeResult.failure(wrap_contract_error(outcome.value))
            callback = outcome.value

        test_outcome = self._invoker.invoke(_typing.cast(_typing.Callable[..., _typing.Any], callback))

        for hook in self._hooks.get_teardown_each_hooks():
            outcome = self._invoker.invoke(
                hook,
                message_prefix=phases.HookPhase.TEARDOWN_EACH.message_prefix,
            )
            if not outcome.success:
                if not test_outcome.success:
                    return NodeResult.failure(
                        combine_cleanup_error(test_outcome.error or "", outcome.error or "")
                    )
                return NodeResult.failure(outcome.error)

        if not test_outcome.success:
            return NodeResult.failure(test_outcome.error)

        return NodeResult.passed()
