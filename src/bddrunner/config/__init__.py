"""
Configuration module for bddrunner.

Uses pydantic-settings for environment variable and YAML loading.
"""

from bddrunner.config.settings import Settings, get_config_file
from bddrunner.config.types import (
    DiscoveryConfig,
    LoggingConfig,
    ReportConfig,
    RunLogConfig,
)

__all__ = [
    "DiscoveryConfig",
    "LoggingConfig",
    "ReportConfig",
    "RunLogConfig",
    "Settings",
    "get_config_file",
]
