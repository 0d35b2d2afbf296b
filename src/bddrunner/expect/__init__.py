"""
Assertion chains exposed to test bodies as ``env.expect``.
"""

from bddrunner.expect.context import ExpectationContext
from bddrunner.expect.expectation import (
    AssertionFailure,
    Expectation,
    Matcher,
    MatcherResult,
)

__all__ = [
    "AssertionFailure",
    "Expectation",
    "ExpectationContext",
    "Matcher",
    "MatcherResult",
]
