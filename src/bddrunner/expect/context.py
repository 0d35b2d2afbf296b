"""
Expectation contexts.

Each result node gets its own ExpectationContext, created from its
parent's. Matchers registered with extend() are visible to the node that
registered them and to nodes created below it afterwards.
"""

from __future__ import annotations

import typing as _typing

import bddrunner.expect.expectation as expectation


class ExpectationContext:
    """Registry of custom matchers plus the entry point for new chains."""

    def __init__(self, parent: ExpectationContext | None = None) -> None:
        self._extensions: dict[str, expectation.Matcher] = (
            dict(parent._extensions) if parent is not None else {}
        )

    @property
    def extensions(self) -> _typing.Mapping[str, expectation.Matcher]:
        return dict(self._extensions)

    def extend(self, matchers: _typing.Mapping[str, expectation.Matcher]) -> None:
        """
        Register custom matchers.

        Raises:
            ValueError: If a name is already registered, shadows a built-in
                matcher or chain word, or maps to something not callable.
        """
        for name, matcher in matchers.items():
            if name in expectation.RESERVED_NAMES:
                raise ValueError(
                    f"Cannot overwrite matcher {name!r}; there is already a built-in matcher "
                    "with that name"
                )
            if name in self._extensions:
                raise ValueError(f"Cannot reassign {name!r} in expect.extend")
            if not callable(matcher):
                raise ValueError(f"Matcher {name!r} must be callable")
            self._extensions[name] = matcher

    def start_expectation_chain(self, value: _typing.Any) -> expectation.Expectation:
        return expectation.Expectation(value, self._extensions)
