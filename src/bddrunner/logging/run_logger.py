"""
Run logger for bddrunner.

Logs run events to JSONL files for debugging and CI archiving.
"""

import datetime as _datetime
import json as _json
import os as _os
import pathlib as _pathlib
import typing as _typing

import bddrunner.constants as constants


class RunLogger:
    """
    Logs test run events to a JSONL file.

    Each line in the file is a JSON object representing an event:
    - run_start: Run metadata (run id, number of top-level suites)
    - node_start: A suite or test was entered
    - node_result: A suite or test received its final status
    - dummy_error: A beforeAll/afterAll hook failed
    - run_end: Totals for the run

    Usage:
        logger = RunLogger(log_dir="/tmp/bddrunner-logs")
        results = TestRunner.run_plan(plan, run_logger=logger)
        logger.close()
    """

    def __init__(
        self,
        *,
        log_dir: _pathlib.Path | str | None = None,
        log_file: _pathlib.Path | str | None = None,
        private_mode: bool = True,
        enabled: bool = True,
    ) -> None:
        """
        Initialize the run logger.

        Args:
            log_dir: Directory for log files (default: /tmp/bddrunner-logs).
            log_file: Explicit log file path (overrides log_dir + auto name).
            private_mode: If True, set log directory to drwx------ (0o700).
            enabled: Whether logging is enabled.
        """
        self._enabled = enabled
        self._file: _typing.TextIO | None = None
        self._file_path: _pathlib.Path | None = None
        self._run_id = _datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self._event_count = 0

        if not enabled:
            return

        if log_file:
            self._file_path = _pathlib.Path(log_file)
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        else:
            base_dir = _pathlib.Path(log_dir) if log_dir else _pathlib.Path(constants.DEFAULT_RUN_LOG_DIR)
            base_dir.mkdir(parents=True, exist_ok=True)

            if private_mode:
                _os.chmod(base_dir, 0o700)

            self._file_path = base_dir / f"bddrunner_{self._run_id}.jsonl"

        # Held as instance state, closed in close()
        self._file = open(self._file_path, "w", encoding="utf-8")  # noqa: SIM115

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def file_path(self) -> _pathlib.Path | None:
        return self._file_path

    @property
    def run_id(self) -> str:
        return self._run_id

    def _write_event(
        self,
        event_type: str,
        data: dict[str, _typing.Any],
    ) -> None:
        """Write an event to the log file."""
        if not self._enabled or not self._file:
            return

        self._event_count += 1
        event = {
            "timestamp": _datetime.datetime.now().isoformat(),
            "event_number": self._event_count,
            "event_type": event_type,
            **data,
        }

        try:
            self._file.write(_json.dumps(event, default=str) + "\n")
            self._file.flush()
        except OSError:
            # A broken log file must not fail the run
            pass

    def log_run_start(self, suite_count: int, has_focus_nodes: bool) -> None:
        self._write_event(
            "run_start",
            {
                "run_id": self._run_id,
                "suite_count": suite_count,
                "has_focus_nodes": has_focus_nodes,
            },
        )

    def log_node_start(self, full_name: str, kind: str) -> None:
        self._write_event("node_start", {"name": full_name, "kind": kind})

    def log_node_result(
        self,
        full_name: str,
        status: str,
        error: str | None = None,
    ) -> None:
        data: dict[str, _typing.Any] = {"name": full_name, "status": status}
        if error is not None:
            data["error"] = error
        self._write_event("node_result", data)

    def log_dummy_error(self, phrase: str, parent: str, message: str) -> None:
        self._write_event(
            "dummy_error",
            {"phase": phrase, "parent": parent, "error": message},
        )

    def log_run_end(
        self,
        success_count: int,
        failure_count: int,
        skipped_count: int,
        error_count: int,
    ) -> None:
        self._write_event(
            "run_end",
            {
                "success_count": success_count,
                "failure_count": failure_count,
                "skipped_count": skipped_count,
                "error_count": error_count,
            },
        )

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, *_exc_info: _typing.Any) -> None:
        self.close()
