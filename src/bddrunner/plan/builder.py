"""
Programmatic construction of test plans.

PlanBuilder mirrors the usual BDD declaration vocabulary (describe/it,
before_each, ...) and produces an immutable TestPlan. Every declaration
method works both as a plain call and as a decorator:

    builder = PlanBuilder()

    @builder.describe("arithmetic")
    def _(suite):
        @suite.before_each
        def reset(env):
            ...

        @suite.it("adds")
        def _(env):
            env.expect(1 + 1).to.equal(2)

    plan = builder.build()
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

import bddrunner.exceptions as exceptions
import bddrunner.hooks.phases as phases
import bddrunner.plan.node as node

_logger = _logging.getLogger(__name__)

ROOT_PHRASE = "<root>"

_F = _typing.TypeVar("_F", bound=node.Callback)


@_dataclasses.dataclass
class _SuiteDraft:
    """Mutable suite under construction."""

    phrase: str
    modifier: node.NodeModifier = node.NodeModifier.NONE
    children: list[node.PlanNode] = _dataclasses.field(default_factory=list)
    hooks: dict[phases.HookPhase, list[node.Callback]] = _dataclasses.field(
        default_factory=dict
    )
    load_error: str | None = None

    def freeze(self) -> node.PlanNode:
        return node.PlanNode(
            phrase=self.phrase,
            kind=node.NodeType.SUITE,
            modifier=self.modifier,
            children=tuple(self.children),
            hooks={phase: tuple(hooks) for phase, hooks in self.hooks.items()},
            load_error=self.load_error,
        )


def describe_load_error(error: BaseException) -> str:
    """Text stored as a suite's load_error when its declaration raised."""
    return f"{type(error).__name__}: {error}"


class PlanBuilder:
    """
    Builds a TestPlan from nested describe/it declarations.

    Suite bodies run immediately, with the builder as their only argument.
    An exception escaping a suite body does not abort the build: it is
    recorded as that suite's load_error and the suite keeps whatever it
    declared before the failure.
    """

    def __init__(self) -> None:
        self._stack: list[_SuiteDraft] = [_SuiteDraft(phrase=ROOT_PHRASE)]

    @property
    def _current(self) -> _SuiteDraft:
        return self._stack[-1]

    # =========================================================================
    # Suites
    # =========================================================================

    def describe(
        self,
        phrase: str,
        fn: _typing.Callable[[PlanBuilder], None] | None = None,
        *,
        modifier: node.NodeModifier = node.NodeModifier.NONE,
    ) -> _typing.Any:
        """Declare a suite. Usable as describe(phrase, fn) or @describe(phrase)."""
        if fn is None:

            def decorator(body: _typing.Callable[[PlanBuilder], None]) -> _typing.Any:
                self.describe(phrase, body, modifier=modifier)
                return body

            return decorator

        draft = _SuiteDraft(phrase=phrase, modifier=modifier)
        self._stack.append(draft)
        try:
            fn(self)
        except Exception as e:
            _logger.debug("Declaration of suite %r failed: %s", phrase, e)
            draft.load_error = describe_load_error(e)
        finally:
            self._stack.pop()

        self._current.children.append(draft.freeze())
        return None

    def fdescribe(
        self,
        phrase: str,
        fn: _typing.Callable[[PlanBuilder], None] | None = None,
    ) -> _typing.Any:
        """Declare a focused suite."""
        return self.describe(phrase, fn, modifier=node.NodeModifier.FOCUS)

    def xdescribe(
        self,
        phrase: str,
        fn: _typing.Callable[[PlanBuilder], None] | None = None,
    ) -> _typing.Any:
        """Declare a skipped suite."""
        return self.describe(phrase, fn, modifier=node.NodeModifier.SKIP)

    def add_suite(self, suite: node.PlanNode) -> None:
        """Attach an already built suite node to the current suite."""
        if not suite.is_suite:
            raise exceptions.PlanError(f"'{suite.phrase}' is not a suite node")
        self._current.children.append(suite)

    # =========================================================================
    # Tests
    # =========================================================================

    def it(
        self,
        phrase: str,
        fn: node.Callback | None = None,
        *,
        modifier: node.NodeModifier = node.NodeModifier.NONE,
    ) -> _typing.Any:
        """Declare a test. Usable as it(phrase, fn) or @it(phrase)."""
        if fn is None:

            def decorator(body: _F) -> _F:
                self.it(phrase, body, modifier=modifier)
                return body

            return decorator

        if not callable(fn):
            raise exceptions.PlanError(f"Test '{phrase}' needs a callable body")

        self._current.children.append(
            node.PlanNode(
                phrase=phrase,
                kind=node.NodeType.TEST,
                modifier=modifier,
                callback=fn,
            )
        )
        return fn

    def fit(self, phrase: str, fn: node.Callback | None = None) -> _typing.Any:
        """Declare a focused test."""
        return self.it(phrase, fn, modifier=node.NodeModifier.FOCUS)

    def xit(self, phrase: str, fn: node.Callback | None = None) -> _typing.Any:
        """Declare a skipped test."""
        return self.it(phrase, fn, modifier=node.NodeModifier.SKIP)

    # =========================================================================
    # Hooks
    # =========================================================================

    def add_hook(self, phase: phases.HookPhase, fn: _F) -> _F:
        """Register a hook for phase on the suite being declared."""
        if not callable(fn):
            raise exceptions.PlanError(f"{phase.phrase} hook must be callable")
        self._current.hooks.setdefault(phase, []).append(fn)
        return fn

    def before_all(self, fn: _F) -> _F:
        return self.add_hook(phases.HookPhase.SETUP_ALL, fn)

    def before_each(self, fn: _F) -> _F:
        return self.add_hook(phases.HookPhase.SETUP_EACH, fn)

    def wrap_each(self, fn: _F) -> _F:
        return self.add_hook(phases.HookPhase.WRAP_EACH, fn)

    def after_each(self, fn: _F) -> _F:
        return self.add_hook(phases.HookPhase.TEARDOWN_EACH, fn)

    def after_all(self, fn: _F) -> _F:
        return self.add_hook(phases.HookPhase.TEARDOWN_ALL, fn)

    # =========================================================================
    # Result
    # =========================================================================

    def build(self) -> node.TestPlan:
        """Freeze everything declared so far into a TestPlan."""
        if len(self._stack) != 1:
            raise exceptions.PlanError("Cannot build a plan while a suite is being declared")
        return node.TestPlan(self._current.freeze())
