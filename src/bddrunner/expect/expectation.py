"""
Assertion chains.

    env.expect(value).to.equal(3)
    env.expect(value).never.to.be.a(str)
    env.expect(lambda: int("x")).to.throw("invalid literal")

Chain words (to, be, been, have, was, at) only improve readability and
return the same expectation. ``never`` returns a negated expectation.
A failed matcher raises AssertionFailure.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

Matcher = _typing.Callable[..., _typing.Any]
"""Custom matcher: (received, *args) -> MatcherResult or (passed, message)."""

CHAIN_WORDS = frozenset({"to", "be", "been", "have", "was", "at"})

BUILTIN_MATCHERS = frozenset({"ok", "equal", "a", "an", "near", "throw"})

RESERVED_NAMES = CHAIN_WORDS | BUILTIN_MATCHERS | {"never"}


class AssertionFailure(AssertionError):
    """Raised when an expectation does not hold."""

    pass


@_dataclasses.dataclass(frozen=True)
class MatcherResult:
    """What a custom matcher reports back."""

    passed: bool
    message: str

    @classmethod
    def coerce(cls, value: _typing.Any) -> MatcherResult:
        """Accept a MatcherResult, a (passed, message) pair or a dict with pass/message."""
        if isinstance(value, MatcherResult):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(passed=bool(value[0]), message=str(value[1]))
        if isinstance(value, dict) and "pass" in value:
            return cls(passed=bool(value["pass"]), message=str(value.get("message", "")))
        raise TypeError(
            "Custom matchers must return a MatcherResult or a (passed, message) pair, "
            f"got {type(value).__name__}"
        )


def _describe(value: _typing.Any) -> str:
    return f"{value!r} ({type(value).__name__})"


class Expectation:
    """
    One assertion chain about a received value.
    """

    def __init__(
        self,
        value: _typing.Any,
        extensions: _typing.Mapping[str, Matcher] | None = None,
        *,
        negated: bool = False,
    ) -> None:
        self._value = value
        self._extensions = extensions if extensions is not None else {}
        self._negated = negated

    def __repr__(self) -> str:
        prefix = "never " if self._negated else ""
        return f"<Expectation {prefix}{self._value!r}>"

    # Chain words
    @property
    def to(self) -> Expectation:
        return self

    @property
    def be(self) -> Expectation:
        return self

    @property
    def been(self) -> Expectation:
        return self

    @property
    def have(self) -> Expectation:
        return self

    @property
    def was(self) -> Expectation:
        return self

    @property
    def at(self) -> Expectation:
        return self

    @property
    def never(self) -> Expectation:
        return Expectation(self._value, self._extensions, negated=not self._negated)

    def __getattr__(self, name: str) -> _typing.Any:
        # Only reached for names that are not regular attributes
        extensions = self.__dict__.get("_extensions", {})
        if name in extensions:
            matcher = extensions[name]

            def run_matcher(*args: _typing.Any) -> Expectation:
                result = MatcherResult.coerce(matcher(self._value, *args))
                passed = result.passed != self._negated
                if not passed:
                    raise AssertionFailure(result.message)
                return self

            return run_matcher
        raise AttributeError(f"Unknown expectation method: {name}")

    def _check(self, passed: bool, message: str, negated_message: str) -> Expectation:
        if self._negated:
            passed = not passed
            message = negated_message
        if not passed:
            raise AssertionFailure(message)
        return self

    def ok(self) -> Expectation:
        """The value is not None."""
        return self._check(
            self._value is not None,
            f"Expected value {_describe(self._value)} to be non-None",
            f"Expected value {_describe(self._value)} to be None",
        )

    def equal(self, expected: _typing.Any) -> Expectation:
        """The value compares equal to expected."""
        return self._check(
            self._value == expected,
            f"Expected value {_describe(expected)}, got {_describe(self._value)} instead",
            f"Expected anything but value {_describe(expected)}",
        )

    def a(self, type_or_name: type | str) -> Expectation:
        """The value is an instance of a type, or its type is named type_or_name."""
        if isinstance(type_or_name, str):
            passed = type(self._value).__name__ == type_or_name
            expected_name = type_or_name
        else:
            passed = isinstance(self._value, type_or_name)
            expected_name = type_or_name.__name__
        return self._check(
            passed,
            f"Expected value of type {expected_name!r}, got value {_describe(self._value)} instead",
            f"Expected value not of type {expected_name!r}, got value {_describe(self._value)} instead",
        )

    an = a

    def near(self, expected: float, limit: float = 1e-7) -> Expectation:
        """The value is within limit of expected."""
        passed = abs(self._value - expected) <= limit
        return self._check(
            passed,
            f"Expected value to be near {expected!r} (within {limit!r}) but got {self._value!r} instead",
            f"Expected value to not be near {expected!r} (within {limit!r}) but got {self._value!r} instead",
        )

    def throw(self, message_substring: str | None = None) -> Expectation:
        """Calling the value raises, optionally with message_substring in the error."""
        if not callable(self._value):
            raise AssertionFailure(f"Expected a callable to call, got {_describe(self._value)}")

        error: Exception | None = None
        try:
            self._value()
        except Exception as e:
            error = e

        if message_substring is None:
            return self._check(
                error is not None,
                "Expected function to throw an error but it did not",
                f"Expected function to succeed, but it threw an error: {error}",
            )

        passed = error is not None and message_substring in str(error)
        return self._check(
            passed,
            f"Expected function to throw an error containing {message_substring!r}, "
            f"but it {'threw: ' + str(error) if error is not None else 'did not throw'}",
            f"Expected function to never throw an error containing {message_substring!r}, "
            f"but it threw: {error}",
        )
