"""
Exception hierarchy for bddrunner.

These are raised for misuse of the engine itself (unbalanced stacks,
invalid declarations). Failures inside test callbacks never surface as
exceptions; the protected invoker turns them into outcome strings.
"""


class BddRunnerError(Exception):
    """Base class for all bddrunner errors."""

    pass


class PlanError(BddRunnerError):
    """Raised when a test plan is declared incorrectly."""

    pass


class HookStackError(BddRunnerError):
    """Raised when the lifecycle hook scope stack is popped while empty."""

    pass


class SessionStateError(BddRunnerError):
    """Raised when the session node stack is used out of order."""

    pass


class ContextError(BddRunnerError):
    """Raised when a node context key is reassigned."""

    pass
