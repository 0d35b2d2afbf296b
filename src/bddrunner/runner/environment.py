"""
What a callback sees while it runs.

Every hook and test body is called with a CallbackEnvironment as its first
argument. It bundles the fail() handle, the expect facade, the node's
shared context and the configured environment extensions.

Whether a callback is running is tracked in a context variable that is
set for exactly one protected invocation at a time. Code outside the
engine can call is_test_running() to change behavior while tests run.
"""

from __future__ import annotations

import contextlib as _contextlib
import contextvars as _contextvars
import types as _types
import typing as _typing

if _typing.TYPE_CHECKING:
    import bddrunner.expect.context as expect_context
    import bddrunner.expect.expectation as expectation
    import bddrunner.session.context as node_context

_running_test: _contextvars.ContextVar[bool] = _contextvars.ContextVar(
    "bddrunner_running_test",
    default=False,
)


def is_test_running() -> bool:
    """Whether a hook or test body is executing in the current context."""
    return _running_test.get()


@_contextlib.contextmanager
def running_test() -> _typing.Iterator[None]:
    """Mark a callback as running for the duration of the block."""
    token = _running_test.set(True)
    try:
        yield
    finally:
        # Resetting by token restores the outer value for nested invocations
        _running_test.reset(token)


class ExpectationFacade:
    """
    The part of an expectation context that callbacks may use.

    Calling the facade starts an assertion chain; extend() registers
    custom matchers. Nothing else of the context is exposed.
    """

    __slots__ = ("_start", "_extend")

    def __init__(self, context: expect_context.ExpectationContext) -> None:
        self._start = context.start_expectation_chain
        self._extend = context.extend

    def __call__(self, value: _typing.Any) -> expectation.Expectation:
        return self._start(value)

    def extend(self, matchers: _typing.Mapping[str, expectation.Matcher]) -> None:
        self._extend(matchers)


class CallbackEnvironment:
    """
    Explicit execution environment passed to every callback.

    Attributes:
        fail: Marks the current invocation as failed without raising.
        expect: Facade for starting assertion chains.
        context: Shared context of the current node.
        extensions: Snapshot of the environment extensions at call time.

    Looking up an attribute that is none of the above falls back to the
    extensions, so ``env.helper`` reads the "helper" extension.
    """

    def __init__(
        self,
        *,
        fail: _typing.Callable[..., None],
        expect: ExpectationFacade,
        context: node_context.NodeContext,
        extensions: _typing.Mapping[str, _typing.Any],
    ) -> None:
        self.fail = fail
        self.expect = expect
        self.context = context
        self.extensions: _typing.Mapping[str, _typing.Any] = _types.MappingProxyType(
            dict(extensions)
        )

    def __getattr__(self, name: str) -> _typing.Any:
        if name.startswith("__"):
            raise AttributeError(name)
        extensions = self.__dict__.get("extensions", {})
        try:
            return extensions[name]
        except KeyError:
            raise AttributeError(
                f"Callback environment has no attribute or extension named {name!r}"
            ) from None

    @property
    def is_test_running(self) -> bool:
        return is_test_running()
