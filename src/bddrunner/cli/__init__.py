"""
CLI module for bddrunner.

Provides the command-line interface using Click.
"""

from bddrunner.cli.main import cli, main

__all__ = ["main", "cli"]
