"""Tests for NodeContext."""

import pytest as _pytest

import bddrunner.exceptions as exceptions
import bddrunner.session.context as context


class TestNodeContext:
    def test_attribute_and_item_access(self) -> None:
        ctx = context.NodeContext()
        ctx.name = "value"
        ctx["other"] = 2
        assert ctx["name"] == "value"
        assert ctx.other == 2
        assert sorted(ctx.keys()) == ["name", "other"]

    def test_reassignment_raises(self) -> None:
        ctx = context.NodeContext()
        ctx.name = 1
        with _pytest.raises(exceptions.ContextError, match="Cannot reassign 'name' in context"):
            ctx.name = 2
        with _pytest.raises(exceptions.ContextError):
            ctx["name"] = 3
        assert ctx.name == 1

    def test_missing_values(self) -> None:
        ctx = context.NodeContext()
        assert ctx.get("missing") is None
        assert ctx.get("missing", 5) == 5
        assert "missing" not in ctx
        with _pytest.raises(AttributeError):
            ctx.missing  # noqa: B018
        with _pytest.raises(KeyError):
            ctx["missing"]

    def test_child_copies_parent(self) -> None:
        parent = context.NodeContext()
        parent.shared = "yes"
        child = context.NodeContext(parent)
        child.own = "child only"

        assert child.shared == "yes"
        assert "own" not in parent

    def test_child_cannot_reassign_inherited_key(self) -> None:
        parent = context.NodeContext()
        parent.shared = "yes"
        child = context.NodeContext(parent)
        with _pytest.raises(exceptions.ContextError):
            child.shared = "no"

    def test_later_parent_values_are_not_seen(self) -> None:
        parent = context.NodeContext()
        child = context.NodeContext(parent)
        parent.late = 1
        assert "late" not in child
