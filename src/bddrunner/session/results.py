"""
Test results tree.

TestResults mirrors the shape of the plan: one ResultNode per suite and
test that the session visited, plus synthetic nodes for beforeAll/afterAll
failures. Counts and the flat error list are filled in by
TestSession.finalize().
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

import bddrunner.plan.node as plan_node


class TestStatus(_enum.Enum):
    """Final status of a result node."""

    __test__ = False

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


_STATUS_SYMBOLS: dict[TestStatus | None, str] = {
    TestStatus.SUCCESS: "+",
    TestStatus.FAILURE: "-",
    TestStatus.SKIPPED: "~",
}


@_dataclasses.dataclass(eq=False)
class ResultNode:
    """
    Result for one plan node.

    Attributes:
        plan_node: The plan node this result belongs to.
        status: Final status (None until the session decides it).
        errors: Error messages recorded against this node.
        children: Results of child nodes, in visit order.
        synthetic: True for beforeAll/afterAll error nodes.
    """

    plan_node: plan_node.PlanNode
    status: TestStatus | None = None
    errors: list[str] = _dataclasses.field(default_factory=list)
    children: list[ResultNode] = _dataclasses.field(default_factory=list)
    synthetic: bool = False

    @property
    def phrase(self) -> str:
        return self.plan_node.phrase

    @property
    def is_test(self) -> bool:
        return self.plan_node.is_test

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, _typing.Any] = {
            "phrase": self.phrase,
            "kind": self.plan_node.kind.value,
            "status": self.status.value if self.status is not None else None,
        }
        if self.errors:
            result["errors"] = list(self.errors)
        if self.synthetic:
            result["synthetic"] = True
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


class TestResults:
    """
    Results of one run of a TestPlan.
    """

    __test__ = False

    def __init__(self, plan: plan_node.TestPlan) -> None:
        self.plan = plan
        self.children: list[ResultNode] = []
        self.errors: list[str] = []
        self.success_count = 0
        self.failure_count = 0
        self.skipped_count = 0

    @property
    def failed(self) -> bool:
        """Whether any test failed or any error was recorded."""
        return self.failure_count > 0 or bool(self.errors)

    def visit_all_nodes(
        self,
        callback: _typing.Callable[[ResultNode, int], None],
    ) -> None:
        """Call callback(node, depth) for every result node, depth first."""

        def visit(nodes: list[ResultNode], depth: int) -> None:
            for child in nodes:
                callback(child, depth)
                visit(child.children, depth + 1)

        visit(self.children, 0)

    def visualize(self, indent: str = "  ") -> str:
        """Render the results as an indented outline with status symbols."""
        lines: list[str] = []

        def add(node: ResultNode, depth: int) -> None:
            symbol = _STATUS_SYMBOLS.get(node.status, "?")
            lines.append(f"{indent * depth}[{symbol}] {node.phrase}")

        self.visit_all_nodes(add)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "skipped_count": self.skipped_count,
            "errors": list(self.errors),
            "children": [child.to_dict() for child in self.children],
        }
