"""Tests for configuration settings."""

import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pydantic as _pydantic
import pytest as _pytest

import bddrunner.config as config
import bddrunner.config.types as types


@_pytest.fixture
def workdir(tmp_path: _pathlib.Path, monkeypatch: _pytest.MonkeyPatch) -> _pathlib.Path:
    """Run in an empty directory so no bddrunner.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSettingsDefaults:
    """Test Settings default values when environment is clean."""

    def test_defaults(self, workdir, isolated_env) -> None:
        with isolated_env:
            settings = config.Settings.construct_without_dotenv()

        assert settings.discovery.pattern == "*_suite.py"
        assert settings.discovery.paths == ["."]
        assert settings.report.no_color is False
        assert settings.report.show_skipped is True
        assert settings.run_log.enabled is False
        assert settings.run_log.dir == _pathlib.Path("/tmp/bddrunner-logs")
        assert settings.run_log.private is True
        assert settings.logging.level == "WARNING"

    def test_no_config_file_by_default(self, workdir, isolated_env) -> None:
        with isolated_env:
            assert config.get_config_file() is None


class TestSettingsSources:
    """Test environment and YAML sources."""

    def test_nested_env_vars(self, workdir, clean_env) -> None:
        env = {
            **clean_env,
            "BDDRUNNER_DISCOVERY__PATTERN": "*_checks.py",
            "BDDRUNNER_RUN_LOG__ENABLED": "true",
            "BDDRUNNER_LOGGING__LEVEL": "debug",
        }
        with _mock.patch.dict(_os.environ, env, clear=True):
            settings = config.Settings.construct_without_dotenv()

        assert settings.discovery.pattern == "*_checks.py"
        assert settings.run_log.enabled is True
        assert settings.logging.level == "DEBUG"

    def test_yaml_file_in_working_directory(self, workdir, isolated_env) -> None:
        (workdir / "bddrunner.yaml").write_text(
            "discovery:\n  pattern: '*_spec.py'\nreport:\n  show_skipped: false\n"
        )
        with isolated_env:
            assert config.get_config_file() == workdir / "bddrunner.yaml"
            settings = config.Settings.construct_without_dotenv()

        assert settings.discovery.pattern == "*_spec.py"
        assert settings.report.show_skipped is False

    def test_env_overrides_yaml(self, workdir, clean_env) -> None:
        (workdir / "bddrunner.yaml").write_text("discovery:\n  pattern: '*_spec.py'\n")
        env = {**clean_env, "BDDRUNNER_DISCOVERY__PATTERN": "*_env.py"}
        with _mock.patch.dict(_os.environ, env, clear=True):
            settings = config.Settings.construct_without_dotenv()

        assert settings.discovery.pattern == "*_env.py"

    def test_explicit_config_file(self, workdir, clean_env) -> None:
        path = workdir / "custom.yaml"
        path.write_text("run_log:\n  enabled: true\n")
        env = {**clean_env, "BDDRUNNER_CONFIG_FILE": str(path)}
        with _mock.patch.dict(_os.environ, env, clear=True):
            assert config.get_config_file() == path
            assert config.Settings.construct_without_dotenv().run_log.enabled is True

    def test_missing_explicit_config_file(self, workdir, clean_env) -> None:
        env = {**clean_env, "BDDRUNNER_CONFIG_FILE": str(workdir / "missing.yaml")}
        with _mock.patch.dict(_os.environ, env, clear=True):
            assert config.get_config_file() is None

    def test_constructor_args_win(self, workdir, isolated_env) -> None:
        with isolated_env:
            settings = config.Settings.construct_without_dotenv(
                report=types.ReportConfig(no_color=True)
            )
        assert settings.report.no_color is True


class TestConfigTypes:
    """Test the nested section models."""

    def test_unknown_keys_rejected(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            types.ReportConfig(colour=True)  # type: ignore[call-arg]

    def test_invalid_log_level(self) -> None:
        with _pytest.raises(_pydantic.ValidationError, match="Unknown log level"):
            types.LoggingConfig(level="loud")

    def test_log_level_normalized(self) -> None:
        assert types.LoggingConfig(level="info").level == "INFO"
