"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with BDDRUNNER_ prefix
3. .env file (if present)
4. bddrunner.yaml in the working directory (or BDDRUNNER_CONFIG_FILE)
5. Field defaults (lowest)

Nested config uses double underscore delimiter:
  BDDRUNNER_RUN_LOG__ENABLED=true
  BDDRUNNER_DISCOVERY__PATTERN=*_checks.py
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import bddrunner.config.types as types

CONFIG_FILE_NAME = "bddrunner.yaml"


def get_config_file() -> _pathlib.Path | None:
    """Determine which YAML config file to load.

    Priority:
    1. BDDRUNNER_CONFIG_FILE if set (explicit override)
    2. bddrunner.yaml in the current working directory
    3. None (defaults and environment only)
    """
    if config_file := _os.environ.get("BDDRUNNER_CONFIG_FILE"):
        path = _pathlib.Path(config_file)
        # Explicitly set but missing: don't fall back silently
        return path if path.exists() else None

    default_path = _pathlib.Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return default_path
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    bddrunner configuration settings.

    All settings can be overridden via environment variables with the
    BDDRUNNER_ prefix. For nested config, use double underscore:
    BDDRUNNER_REPORT__NO_COLOR=true
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="BDDRUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args), highest
        2. env_settings (BDDRUNNER_* env vars)
        3. dotenv_settings (.env file)
        4. yaml settings (bddrunner.yaml)
        5. file_secret_settings
        """
        sources: list[_pydantic_settings.PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
        ]

        config_file = get_config_file()
        if config_file is not None:
            sources.append(
                _pydantic_settings.YamlConfigSettingsSource(settings_cls, yaml_file=config_file)
            )

        sources.append(file_secret_settings)
        return tuple(sources)

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    discovery: types.DiscoveryConfig = _pydantic.Field(default_factory=types.DiscoveryConfig)
    """Suite discovery settings."""

    report: types.ReportConfig = _pydantic.Field(default_factory=types.ReportConfig)
    """Console report settings."""

    run_log: types.RunLogConfig = _pydantic.Field(default_factory=types.RunLogConfig)
    """JSONL run log settings."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Python logging settings."""
