"""
Shared constants for bddrunner.

Message templates that several modules agree on live here so the engine,
the session and the tests read the same text.
"""

DEFAULT_FAIL_MESSAGE = "fail() was called."
"""Message used when fail() is called without an argument."""

CLEANUP_ERROR_SEPARATOR = "\nWhile cleaning up the failed test another error was found:\n"
"""Joins a failed test body's error with the first afterEach error."""

WRAP_CONTRACT_MESSAGE = "expected wrapEach to return a function, but instead it returned "
"""Prefix of the error reported when a wrapEach hook returns a non-callable."""

PLANNING_ERROR_PREFIX = "Error during planning: "
"""Prefix for suites whose declaration failed while the plan was built."""

DEFAULT_SUITE_PATTERN = "*_suite.py"
"""Glob used to find suite modules when a directory is passed to the loader."""

DEFAULT_RUN_LOG_DIR = "/tmp/bddrunner-logs"
"""Default directory for JSONL run logs."""
