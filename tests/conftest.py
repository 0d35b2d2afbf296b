"""
Shared pytest fixtures for bddrunner tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import bddrunner.config as config
import bddrunner.plan as plan
import bddrunner.runner as runner
import bddrunner.session as session

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "BDDRUNNER_CONFIG_FILE",
    "BDDRUNNER_DISCOVERY__PATTERN",
    "BDDRUNNER_DISCOVERY__PATHS",
    "BDDRUNNER_REPORT__NO_COLOR",
    "BDDRUNNER_REPORT__SHOW_SKIPPED",
    "BDDRUNNER_REPORT__SHOW_TRACEBACKS",
    "BDDRUNNER_RUN_LOG__ENABLED",
    "BDDRUNNER_RUN_LOG__DIR",
    "BDDRUNNER_RUN_LOG__PRIVATE",
    "BDDRUNNER_LOGGING__LEVEL",
]


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with bddrunner keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings.construct_without_dotenv()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def clean_settings(isolated_env) -> config.Settings:
    """Settings instance isolated from environment and .env file."""
    with isolated_env:
        return config.Settings.construct_without_dotenv()


@_pytest.fixture
def builder() -> plan.PlanBuilder:
    """Fresh plan builder."""
    return plan.PlanBuilder()


@_pytest.fixture
def calls() -> list[str]:
    """Shared list that callbacks append to, for checking what ran and in which order."""
    return []


@_pytest.fixture
def run_plan() -> _typing.Callable[..., session.TestResults]:
    """
    Run a plan with an empty, private environment.

    Usage:
        def test_something(builder, run_plan):
            builder.describe("suite", ...)
            results = run_plan(builder.build())
    """

    def _run(
        test_plan: plan.TestPlan,
        environment: dict[str, _typing.Any] | None = None,
    ) -> session.TestResults:
        return runner.TestRunner.run_plan(
            test_plan,
            environment=environment if environment is not None else {},
        )

    return _run


@_pytest.fixture
def find_result() -> _typing.Callable[..., session.ResultNode]:
    """
    Look up a result node by the phrases on its path.

    Usage:
        node = find_result(results, "suite", "test")
    """

    def _find(results: session.TestResults, *phrases: str) -> session.ResultNode:
        nodes = results.children
        found: session.ResultNode | None = None
        for phrase in phrases:
            matches = [n for n in nodes if n.phrase == phrase]
            assert matches, f"No result named {phrase!r} among {[n.phrase for n in nodes]}"
            found = matches[0]
            nodes = found.children
        assert found is not None
        return found

    return _find
