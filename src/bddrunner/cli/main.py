"""
Main CLI entry point for bddrunner.

Provides the command-line interface using Click.
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click
import pydantic as _pydantic

import bddrunner
import bddrunner.config as config
import bddrunner.logging as run_logging
import bddrunner.plan as plan
import bddrunner.reporting as reporting
import bddrunner.runner as runner

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _load_settings() -> config.Settings:
    """Load settings, turning validation problems into a CLI error."""
    try:
        return config.Settings()
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid configuration: {e}") from e


def _configure_logging(level: str) -> None:
    _logging.basicConfig(
        level=getattr(_logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_plan(
    paths: tuple[_pathlib.Path, ...],
    pattern: str | None,
    settings: config.Settings,
) -> plan.TestPlan:
    search_paths: list[_pathlib.Path | str] = list(paths) or list(settings.discovery.paths)
    try:
        return plan.load_plan(search_paths, pattern or settings.discovery.pattern)
    except FileNotFoundError as e:
        raise _click.ClickException(str(e)) from e


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(bddrunner.__version__, "-v", "--version", prog_name="bddrunner")
def cli() -> None:
    """bddrunner - run BDD-style suites with lifecycle hooks."""


@cli.command()
@_click.argument(
    "paths",
    nargs=-1,
    type=_click.Path(exists=True, path_type=_pathlib.Path),
)
@_click.option("--pattern", type=str, default=None, help="Glob for suite modules in directories")
@_click.option("--json", "json_output", is_flag=True, help="Print results as JSON")
@_click.option("--plain", is_flag=True, help="Plain text report instead of the Rich tree")
@_click.option("--no-color", is_flag=True, default=False, help="Disable colors")
@_click.option(
    "--run-log/--no-run-log",
    "run_log",
    default=None,
    help="Write a JSONL log of run events",
)
@_click.option(
    "--log-dir",
    type=_click.Path(file_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Directory for the JSONL run log",
)
@_click.option("--verbose", is_flag=True, help="Enable debug logging")
@_click.pass_context
def run(
    ctx: _click.Context,
    paths: tuple[_pathlib.Path, ...],
    pattern: str | None,
    json_output: bool,
    plain: bool,
    no_color: bool,
    run_log: bool | None,
    log_dir: _pathlib.Path | None,
    verbose: bool,
) -> None:
    """Run the suites found in PATHS (files or directories)."""
    settings = _load_settings()
    _configure_logging("DEBUG" if verbose else settings.logging.level)

    test_plan = _load_plan(paths, pattern, settings)

    log_enabled = settings.run_log.enabled if run_log is None else run_log
    run_logger = run_logging.RunLogger(
        log_dir=log_dir or settings.run_log.dir,
        private_mode=settings.run_log.private,
        enabled=log_enabled,
    )
    try:
        results = runner.TestRunner.run_plan(test_plan, run_logger=run_logger)
    finally:
        run_logger.close()

    if json_output:
        _click.echo(_json.dumps(results.to_dict(), indent=2))
    else:
        reporter: reporting.Reporter
        if plain:
            reporter = reporting.TextReporter(
                _click.get_text_stream("stdout"),
                show_skipped=settings.report.show_skipped,
                show_tracebacks=settings.report.show_tracebacks,
            )
        else:
            reporter = reporting.RichReporter(
                no_color=no_color or settings.report.no_color,
                show_skipped=settings.report.show_skipped,
                show_tracebacks=settings.report.show_tracebacks,
            )
        reporter.report(results)

    if run_logger.file_path is not None:
        _click.echo(f"Run log: {run_logger.file_path}", err=True)

    ctx.exit(1 if results.failed else 0)


@cli.command(name="plan")
@_click.argument(
    "paths",
    nargs=-1,
    type=_click.Path(exists=True, path_type=_pathlib.Path),
)
@_click.option("--pattern", type=str, default=None, help="Glob for suite modules in directories")
def show_plan(paths: tuple[_pathlib.Path, ...], pattern: str | None) -> None:
    """Print the plan outline without running anything."""
    settings = _load_settings()
    test_plan = _load_plan(paths, pattern, settings)
    _click.echo(test_plan.visualize())

    for suite in test_plan.find_nodes(lambda node: node.load_error is not None):
        _click.echo(f"Planning error in {suite.phrase}: {suite.load_error}", err=True)


def main() -> None:
    """Console script entry point."""
    cli()
