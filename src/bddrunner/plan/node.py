"""
Plan tree types.

A plan is an immutable tree of suites and tests. Suites carry the hooks
declared directly on them; tests carry one body callback. The engine only
reads the tree, it never mutates it.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import types as _types
import typing as _typing

import bddrunner.hooks.phases as phases

Callback = _typing.Callable[..., _typing.Any]
"""A hook or test body. Called with the callback environment first."""


class NodeType(_enum.Enum):
    """Kind of plan node."""

    TEST = "test"
    SUITE = "suite"


class NodeModifier(_enum.Enum):
    """Per-node annotation that influences skip selection."""

    NONE = "none"
    FOCUS = "focus"
    SKIP = "skip"


@_dataclasses.dataclass(frozen=True, eq=False)
class PlanNode:
    """
    One node of the declaration tree.

    Attributes:
        phrase: Human-readable name of the suite or test.
        kind: Whether this is a test or a suite.
        modifier: Focus/skip annotation.
        callback: The test body (tests only).
        children: Ordered child nodes (suites only).
        hooks: Hooks declared directly on this suite, per phase.
        load_error: Set when the suite's declaration failed.
    """

    phrase: str
    kind: NodeType
    modifier: NodeModifier = NodeModifier.NONE
    callback: Callback | None = None
    children: tuple[PlanNode, ...] = ()
    hooks: _typing.Mapping[phases.HookPhase, tuple[Callback, ...]] = _dataclasses.field(
        default_factory=dict
    )
    load_error: str | None = None

    def __post_init__(self) -> None:
        if self.kind is NodeType.TEST:
            if self.children:
                raise ValueError(f"Test node '{self.phrase}' cannot have children")
            if any(self.hooks.values()):
                raise ValueError(f"Test node '{self.phrase}' cannot declare hooks")
        # Hook lists are stored as tuples behind a read-only mapping
        object.__setattr__(
            self,
            "hooks",
            _types.MappingProxyType({phase: tuple(hooks) for phase, hooks in self.hooks.items()}),
        )
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_test(self) -> bool:
        return self.kind is NodeType.TEST

    @property
    def is_suite(self) -> bool:
        return self.kind is NodeType.SUITE

    def get_hooks(self, phase: phases.HookPhase) -> tuple[Callback, ...]:
        """Hooks declared directly on this node for the given phase."""
        return self.hooks.get(phase, ())


class TestPlan:
    """
    A complete plan: the root suite plus tree-wide queries.

    The root suite itself is never reported as a result node; its children
    are the top-level entries of the results.
    """

    __test__ = False

    def __init__(self, root: PlanNode) -> None:
        if not root.is_suite:
            raise ValueError("The root of a test plan must be a suite")
        self.root = root

    @property
    def children(self) -> tuple[PlanNode, ...]:
        return self.root.children

    def visit_all_nodes(
        self,
        callback: _typing.Callable[[PlanNode, int], None],
    ) -> None:
        """Call callback(node, depth) for every node below the root, depth first."""

        def visit(node: PlanNode, depth: int) -> None:
            for child in node.children:
                callback(child, depth)
                visit(child, depth + 1)

        visit(self.root, 0)

    def find_nodes(
        self,
        predicate: _typing.Callable[[PlanNode], bool],
    ) -> list[PlanNode]:
        """Return every node below the root that satisfies predicate."""
        found: list[PlanNode] = []

        def check(node: PlanNode, _depth: int) -> None:
            if predicate(node):
                found.append(node)

        self.visit_all_nodes(check)
        return found

    @property
    def has_focus_nodes(self) -> bool:
        """Whether any node in the plan carries the focus modifier."""
        return bool(self.find_nodes(lambda node: node.modifier is NodeModifier.FOCUS))

    def visualize(self, indent: str = "  ") -> str:
        """Render the plan as an indented outline (for debugging)."""
        lines: list[str] = []

        def add(node: PlanNode, depth: int) -> None:
            marker = "" if node.modifier is NodeModifier.NONE else f" [{node.modifier.value}]"
            lines.append(f"{indent * depth}{node.kind.value.title()} {node.phrase}{marker}")

        self.visit_all_nodes(add)
        return "\n".join(lines)
