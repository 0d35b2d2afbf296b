"""
Protected invocation of hooks and test bodies.

The invoker is the failure boundary of the engine: whatever a callback
raises is turned into an Outcome with a readable, prefixed error string,
so one failing callback never aborts the run.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import traceback as _traceback
import typing as _typing

import bddrunner.constants as constants
import bddrunner.expect.expectation as expectation
import bddrunner.runner.environment as environment

if _typing.TYPE_CHECKING:
    import bddrunner.session.base as session_base

_logger = _logging.getLogger(__name__)

_THIS_FILE = __file__


@_dataclasses.dataclass(frozen=True)
class Outcome:
    """
    Result of one protected invocation.

    Attributes:
        success: Whether the callback completed without failing.
        returns: Values the callback returned (successful outcomes only).
        error: Prefixed error text with a stack trace (failed outcomes only).
    """

    success: bool
    returns: tuple[_typing.Any, ...] = ()
    error: str | None = None

    @classmethod
    def succeeded(cls, *values: _typing.Any) -> Outcome:
        return cls(success=True, returns=values)

    @classmethod
    def failed(cls, error: str) -> Outcome:
        return cls(success=False, error=error)

    @property
    def value(self) -> _typing.Any:
        """First returned value, or None."""
        return self.returns[0] if self.returns else None


def _user_frames(frames: list[_traceback.FrameSummary]) -> list[_traceback.FrameSummary]:
    """Drop the engine frames that lead up to the callback."""
    for index in range(len(frames) - 1, -1, -1):
        if frames[index].filename == _THIS_FILE:
            return frames[index + 1 :]
    return frames


def _render_frames(frames: list[_traceback.FrameSummary]) -> str:
    if not frames:
        return ""
    return "\nTraceback (most recent call last):\n" + "".join(_traceback.format_list(frames)).rstrip(
        "\n"
    )


def describe_error(error: BaseException) -> str:
    """One-line description of an exception raised by a callback."""
    if isinstance(error, expectation.AssertionFailure):
        return str(error)
    return f"{type(error).__name__}: {error}"


def format_error(error: BaseException) -> str:
    """Describe an exception and append the traceback of where it was raised."""
    frames = _user_frames(_traceback.extract_tb(error.__traceback__))
    return describe_error(error) + _render_frames(frames)


def format_call_site(message: str) -> str:
    """Append the stack of the code that called into this module."""
    frames = _traceback.extract_stack()
    while frames and frames[-1].filename == _THIS_FILE:
        frames.pop()
    return message + _render_frames(_user_frames(frames))


class ProtectedInvoker:
    """
    Runs callbacks inside a failure boundary.

    The environment-extension mapping is read on every invocation, so
    entries added or removed between runs are picked up.
    """

    def __init__(
        self,
        session: session_base.Session,
        extensions: _typing.Mapping[str, _typing.Any] | None = None,
    ) -> None:
        self._session = session
        self._extensions = extensions if extensions is not None else {}

    def invoke(
        self,
        callback: _typing.Callable[..., _typing.Any],
        args: tuple[_typing.Any, ...] = (),
        message_prefix: str = "",
    ) -> Outcome:
        """
        Call ``callback(env, *args)`` and capture how it ended.

        A raised exception wins over an earlier fail() call. fail() only
        decides the outcome when the callback otherwise returns normally.

        Args:
            callback: Hook or test body.
            args: Extra positional arguments after the environment.
            message_prefix: Prepended to any error message.

        Returns:
            Outcome of the call.
        """
        fail_message: str | None = None

        def fail(message: _typing.Any = None) -> None:
            nonlocal fail_message
            text = constants.DEFAULT_FAIL_MESSAGE if message is None else str(message)
            fail_message = message_prefix + format_call_site(text)

        env = environment.CallbackEnvironment(
            fail=fail,
            expect=environment.ExpectationFacade(self._session.get_expectation_context()),
            context=self._session.get_context(),
            extensions=self._extensions,
        )

        with environment.running_test():
            try:
                value = callback(env, *args)
            except Exception as e:
                outcome = Outcome.failed(message_prefix + format_error(e))
            else:
                if fail_message is not None:
                    outcome = Outcome.failed(fail_message)
                else:
                    outcome = Outcome.succeeded(value)

        if not outcome.success:
            _logger.debug(
                "Callback %s failed: %s",
                getattr(callback, "__qualname__", repr(callback)),
                outcome.error.splitlines()[0] if outcome.error else "",
            )
        return outcome
