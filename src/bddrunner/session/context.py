"""
Per-node shared context.

Hooks and test bodies receive ``env.context``: a small namespace for
handing values from hooks to tests. A node's context starts as a copy of
its parent's, so values set in a suite's beforeAll are visible to every
test below it. A key can be set once per context; reassigning it raises.
"""

from __future__ import annotations

import typing as _typing

import bddrunner.exceptions as exceptions


class NodeContext:
    """Attribute- and item-accessible write-once namespace."""

    def __init__(self, parent: NodeContext | None = None) -> None:
        values = dict(parent._values) if parent is not None else {}
        object.__setattr__(self, "_values", values)

    def __getattr__(self, name: str) -> _typing.Any:
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"Context has no value named {name!r}") from None

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        self._set(name, value)

    def __getitem__(self, name: str) -> _typing.Any:
        return self._values[name]

    def __setitem__(self, name: str, value: _typing.Any) -> None:
        self._set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"NodeContext({self._values!r})"

    def _set(self, name: str, value: _typing.Any) -> None:
        if name in self._values:
            raise exceptions.ContextError(f"Cannot reassign {name!r} in context")
        self._values[name] = value

    def get(self, name: str, default: _typing.Any = None) -> _typing.Any:
        return self._values.get(name, default)

    def keys(self) -> list[str]:
        return list(self._values)
