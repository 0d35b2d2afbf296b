"""
Lifecycle hook phases.

A suite can declare hooks for five phases. Suite-level phases run once
when the suite is entered or left; per-test phases run around every test
below the suite.
"""

from __future__ import annotations

import enum as _enum


class HookPhase(_enum.Enum):
    """
    When a hook runs relative to the node(s) it decorates.
    """

    SETUP_ALL = "beforeAll"
    """Once, before any child of the declaring suite runs."""

    SETUP_EACH = "beforeEach"
    """Before every test below the declaring suite."""

    WRAP_EACH = "wrapEach"
    """Receives each test body and returns a replacement callback."""

    TEARDOWN_EACH = "afterEach"
    """After every test below the declaring suite, even if the test failed."""

    TEARDOWN_ALL = "afterAll"
    """Once, after the declaring suite's children, even if beforeAll failed."""

    @property
    def phrase(self) -> str:
        """Name used when reporting errors for this phase."""
        return self.value

    @property
    def message_prefix(self) -> str:
        """Prefix prepended to error messages produced by hooks of this phase."""
        if self is HookPhase.WRAP_EACH:
            return ""
        return f"{self.value} hook: "

    @property
    def is_suite_level(self) -> bool:
        """Whether hooks for this phase run once per suite rather than per test."""
        return self in {HookPhase.SETUP_ALL, HookPhase.TEARDOWN_ALL}

    @property
    def is_teardown(self) -> bool:
        """Whether this phase runs innermost scope first."""
        return self in {HookPhase.TEARDOWN_EACH, HookPhase.TEARDOWN_ALL}
