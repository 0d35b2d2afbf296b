"""
Suite module loading.

Suite modules are Python files (``*_suite.py`` by default) that define a
module-level ``declare(suite)`` function. Each module becomes one
top-level suite, named after the module, whose body is ``declare``.

A module that cannot be imported, or that has no ``declare`` function,
still shows up in the plan: as a suite carrying a load_error, so the run
reports it instead of silently dropping it.
"""

from __future__ import annotations

import importlib.util as _importlib_util
import logging as _logging
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import bddrunner.constants as constants
import bddrunner.plan.builder as builder
import bddrunner.plan.node as node

_logger = _logging.getLogger(__name__)

DECLARE_FUNCTION = "declare"


class SuiteLoadError(Exception):
    """Raised when a suite module fails to load."""

    pass


def find_suite_files(
    paths: _typing.Iterable[_pathlib.Path | str],
    pattern: str = constants.DEFAULT_SUITE_PATTERN,
) -> list[_pathlib.Path]:
    """
    Expand files and directories into an ordered list of suite modules.

    Files are taken as given. Directories are searched recursively for
    files matching pattern, in sorted order.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    found: list[_pathlib.Path] = []
    for raw in paths:
        path = _pathlib.Path(raw)
        if path.is_dir():
            found.extend(sorted(p for p in path.rglob(pattern) if p.is_file()))
        elif path.is_file():
            found.append(path)
        else:
            raise FileNotFoundError(f"Suite path not found: {path}")

    # Preserve first occurrence order when paths overlap
    unique: list[_pathlib.Path] = []
    seen: set[_pathlib.Path] = set()
    for path in found:
        resolved = path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique.append(path)
    return unique


def load_suite_module(path: _pathlib.Path, index: int = 0) -> _typing.Any:
    """
    Import a suite module from a file path.

    Args:
        path: Path to the .py file.
        index: Position of the file in the run (keeps module names unique).

    Returns:
        The loaded module.

    Raises:
        SuiteLoadError: If the module fails to load.
    """
    if path.suffix != ".py":
        raise SuiteLoadError(f"Suite file must be .py: {path}")

    module_name = f"bddrunner_suites.s{index}_{path.stem}"

    try:
        spec = _importlib_util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise SuiteLoadError(f"Cannot load module spec for: {path}")

        module = _importlib_util.module_from_spec(spec)
        _sys.modules[module_name] = module
        spec.loader.exec_module(module)

        return module
    except SuiteLoadError:
        raise
    except Exception as e:
        _sys.modules.pop(module_name, None)
        raise SuiteLoadError(f"Failed to load suite {path}: {builder.describe_load_error(e)}") from e


def _failed_suite(phrase: str, reason: str) -> node.PlanNode:
    return node.PlanNode(phrase=phrase, kind=node.NodeType.SUITE, load_error=reason)


def load_plan(
    paths: _typing.Iterable[_pathlib.Path | str],
    pattern: str = constants.DEFAULT_SUITE_PATTERN,
) -> node.TestPlan:
    """
    Build a TestPlan from suite modules.

    Args:
        paths: Files and/or directories to load.
        pattern: Glob used inside directories.

    Returns:
        Plan with one top-level suite per module, in file order.
    """
    plan_builder = builder.PlanBuilder()

    for index, path in enumerate(find_suite_files(paths, pattern)):
        phrase = path.stem
        try:
            module = load_suite_module(path, index)
        except SuiteLoadError as e:
            _logger.warning("%s", e)
            plan_builder.add_suite(_failed_suite(phrase, str(e)))
            continue

        declare = getattr(module, DECLARE_FUNCTION, None)
        if not callable(declare):
            plan_builder.add_suite(
                _failed_suite(
                    phrase,
                    f"Suite module {path} does not define {DECLARE_FUNCTION}(suite)",
                )
            )
            continue

        _logger.debug("Declaring suite %s from %s", phrase, path)
        plan_builder.describe(phrase, declare)

    return plan_builder.build()
