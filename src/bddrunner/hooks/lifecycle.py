"""
Lifecycle hook composition.

LifecycleHooks keeps one HookScope per suite on the path from the root to
the suite being run. Scopes are indexed by depth: entering a suite pushes
exactly one scope, leaving it pops exactly one.

Ordering rules:
- beforeAll / afterAll: only the innermost scope (they run once per suite).
- beforeEach / wrapEach: outermost scope first, declaration order within.
- afterEach: innermost scope first, declaration order within.
"""

from __future__ import annotations

import contextlib as _contextlib
import dataclasses as _dataclasses
import typing as _typing

import bddrunner.exceptions as exceptions
import bddrunner.hooks.phases as phases

if _typing.TYPE_CHECKING:
    import bddrunner.plan.node as plan_node


@_dataclasses.dataclass(frozen=True)
class HookScope:
    """Hooks declared directly on one suite."""

    phrase: str
    depth: int
    hooks: _typing.Mapping[phases.HookPhase, tuple[_typing.Callable[..., _typing.Any], ...]]

    def get(self, phase: phases.HookPhase) -> tuple[_typing.Callable[..., _typing.Any], ...]:
        return self.hooks.get(phase, ())


class LifecycleHooks:
    """
    Stack of hook scopes for the suite currently being run.
    """

    def __init__(self) -> None:
        self._stack: list[HookScope] = []

    @property
    def depth(self) -> int:
        """Number of scopes currently pushed."""
        return len(self._stack)

    def push_scope(self, node: plan_node.PlanNode) -> HookScope:
        """Push the hooks declared on node as the new innermost scope."""
        scope = HookScope(
            phrase=node.phrase,
            depth=len(self._stack),
            hooks={phase: node.get_hooks(phase) for phase in phases.HookPhase},
        )
        self._stack.append(scope)
        return scope

    def pop_scope(self) -> HookScope:
        """Discard the innermost scope."""
        if not self._stack:
            raise exceptions.HookStackError("Tried to pop from an empty hook scope stack")
        return self._stack.pop()

    @_contextlib.contextmanager
    def scope(self, node: plan_node.PlanNode) -> _typing.Iterator[HookScope]:
        """Push node's hooks for the duration of the block, popping on any exit."""
        pushed = self.push_scope(node)
        try:
            yield pushed
        finally:
            self.pop_scope()

    def _innermost(self, phase: phases.HookPhase) -> list[_typing.Callable[..., _typing.Any]]:
        if not self._stack:
            return []
        return list(self._stack[-1].get(phase))

    def _outermost_first(self, phase: phases.HookPhase) -> list[_typing.Callable[..., _typing.Any]]:
        return [hook for scope in self._stack for hook in scope.get(phase)]

    def _innermost_first(self, phase: phases.HookPhase) -> list[_typing.Callable[..., _typing.Any]]:
        return [hook for scope in reversed(self._stack) for hook in scope.get(phase)]

    def get_setup_all_hooks(self) -> list[_typing.Callable[..., _typing.Any]]:
        return self._innermost(phases.HookPhase.SETUP_ALL)

    def get_teardown_all_hooks(self) -> list[_typing.Callable[..., _typing.Any]]:
        return self._innermost(phases.HookPhase.TEARDOWN_ALL)

    def get_setup_each_hooks(self) -> list[_typing.Callable[..., _typing.Any]]:
        return self._outermost_first(phases.HookPhase.SETUP_EACH)

    def get_wrap_each_hooks(self) -> list[_typing.Callable[..., _typing.Any]]:
        return self._outermost_first(phases.HookPhase.WRAP_EACH)

    def get_teardown_each_hooks(self) -> list[_typing.Callable[..., _typing.Any]]:
        return self._innermost_first(phases.HookPhase.TEARDOWN_EACH)

    def get_hooks(self, phase: phases.HookPhase) -> list[_typing.Callable[..., _typing.Any]]:
        """Ordered hooks for phase across the active scopes."""
        getters = {
            phases.HookPhase.SETUP_ALL: self.get_setup_all_hooks,
            phases.HookPhase.SETUP_EACH: self.get_setup_each_hooks,
            phases.HookPhase.WRAP_EACH: self.get_wrap_each_hooks,
            phases.HookPhase.TEARDOWN_EACH: self.get_teardown_each_hooks,
            phases.HookPhase.TEARDOWN_ALL: self.get_teardown_all_hooks,
        }
        return getters[phase]()
