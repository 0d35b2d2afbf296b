"""
Session state for bddrunner.

The session records what happened to every node during a run and turns it
into a TestResults tree.
"""

from bddrunner.session.base import Session
from bddrunner.session.context import NodeContext
from bddrunner.session.results import ResultNode, TestResults, TestStatus
from bddrunner.session.session import TestSession

__all__ = [
    "NodeContext",
    "ResultNode",
    "Session",
    "TestResults",
    "TestSession",
    "TestStatus",
]
