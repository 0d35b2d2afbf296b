"""
Session contract.

The runner reports everything it does to a Session: entering and leaving
nodes, skip decisions and terminal outcomes. How statuses roll up and how
focus/skip is decided belongs to the session, not to the runner.
"""

from __future__ import annotations

import abc as _abc
import typing as _typing

if _typing.TYPE_CHECKING:
    import bddrunner.expect.context as expect_context
    import bddrunner.plan.node as plan_node
    import bddrunner.session.context as node_context
    import bddrunner.session.results as results


class Session(_abc.ABC):
    """
    Receives node notifications and outcomes from the runner.

    The runner calls these exactly once per node per phase, in order:
    push_node, then either set_skipped/set_success/set_error or
    set_status_from_children, then pop_node.
    """

    @_abc.abstractmethod
    def push_node(self, node: plan_node.PlanNode) -> None:
        """Enter a child node of the current node."""
        ...

    @_abc.abstractmethod
    def pop_node(self) -> None:
        """Leave the current node."""
        ...

    @_abc.abstractmethod
    def should_skip(self) -> bool:
        """Whether the current test node should be skipped."""
        ...

    @_abc.abstractmethod
    def set_skipped(self) -> None:
        ...

    @_abc.abstractmethod
    def set_success(self) -> None:
        ...

    @_abc.abstractmethod
    def set_error(self, message: str) -> None:
        ...

    @_abc.abstractmethod
    def set_status_from_children(self) -> None:
        """Decide the current suite's status from its children's statuses."""
        ...

    @_abc.abstractmethod
    def add_dummy_error(self, phrase: str, message: str) -> None:
        """Record an error that belongs to a suite phase rather than a test."""
        ...

    @_abc.abstractmethod
    def get_context(self) -> node_context.NodeContext:
        """Shared context of the current node."""
        ...

    @_abc.abstractmethod
    def get_expectation_context(self) -> expect_context.ExpectationContext:
        """Expectation context of the current node."""
        ...

    @_abc.abstractmethod
    def finalize(self) -> results.TestResults:
        """Close the session and return its results."""
        ...
