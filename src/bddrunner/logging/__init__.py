"""
Run logging for bddrunner.

Provides JSONL logging of run events for debugging and CI archiving.
"""

from bddrunner.logging.run_logger import RunLogger

__all__ = ["RunLogger"]
