"""
Test plan model and construction.

A plan is the immutable tree of suites and tests the runner walks.
"""

from bddrunner.plan.builder import PlanBuilder
from bddrunner.plan.loader import SuiteLoadError, find_suite_files, load_plan
from bddrunner.plan.node import (
    Callback,
    NodeModifier,
    NodeType,
    PlanNode,
    TestPlan,
)

__all__ = [
    "Callback",
    "NodeModifier",
    "NodeType",
    "PlanBuilder",
    "PlanNode",
    "SuiteLoadError",
    "TestPlan",
    "find_suite_files",
    "load_plan",
]
