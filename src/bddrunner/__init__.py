"""
bddrunner - BDD test execution engine

Runs trees of describe/it declarations with beforeAll, beforeEach,
wrapEach, afterEach and afterAll hooks, isolating every failure to the
node it belongs to.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("bddrunner")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "bddrunner Contributors"

from bddrunner.config import Settings  # noqa: E402
from bddrunner.plan import PlanBuilder, TestPlan, load_plan  # noqa: E402
from bddrunner.runner import TestRunner, is_test_running  # noqa: E402
from bddrunner.session import TestResults, TestStatus  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "PlanBuilder",
    "Settings",
    "TestPlan",
    "TestResults",
    "TestRunner",
    "TestStatus",
    "is_test_running",
    "load_plan",
]
