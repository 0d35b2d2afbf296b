"""
Lifecycle hooks for bddrunner.

Suites declare hooks for five phases (beforeAll, beforeEach, wrapEach,
afterEach, afterAll). LifecycleHooks composes the hooks of every suite on
the current path into the ordered lists the runner executes.

Example usage:
    from bddrunner.hooks import HookPhase, LifecycleHooks

    hooks = LifecycleHooks()
    with hooks.scope(suite_node):
        for hook in hooks.get_hooks(HookPhase.SETUP_EACH):
            ...
"""

from bddrunner.hooks.lifecycle import HookScope, LifecycleHooks
from bddrunner.hooks.phases import HookPhase

__all__ = [
    "HookPhase",
    "HookScope",
    "LifecycleHooks",
]
