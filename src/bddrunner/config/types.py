"""
Nested configuration sections.

Each section is a plain pydantic model; Settings composes them. Nested
values can be set from the environment with a double underscore:
BDDRUNNER_RUN_LOG__ENABLED=true
"""

import pathlib as _pathlib

import pydantic as _pydantic

import bddrunner.constants as constants


class DiscoveryConfig(_pydantic.BaseModel):
    """How suite modules are found."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    pattern: str = constants.DEFAULT_SUITE_PATTERN
    """Glob applied inside directories passed to the runner."""

    paths: list[str] = _pydantic.Field(default_factory=lambda: ["."])
    """Paths searched when none are given on the command line."""


class ReportConfig(_pydantic.BaseModel):
    """How results are shown."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    no_color: bool = False
    """Disable colors in the console report."""

    show_skipped: bool = True
    """Include skipped tests in the console report."""

    show_tracebacks: bool = True
    """Print full error text (with tracebacks) after the summary."""


class RunLogConfig(_pydantic.BaseModel):
    """JSONL run log settings."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    enabled: bool = False
    """Write a JSONL log of run events."""

    dir: _pathlib.Path = _pathlib.Path(constants.DEFAULT_RUN_LOG_DIR)
    """Directory for run logs."""

    private: bool = True
    """Restrict the log directory to the current user (0o700)."""


class LoggingConfig(_pydantic.BaseModel):
    """Python logging settings for the CLI."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    level: str = "WARNING"
    """Level for the root logger when running from the CLI."""

    @_pydantic.field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return normalized
