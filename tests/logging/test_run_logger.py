"""Tests for RunLogger."""

import json as _json
import pathlib as _pathlib

import bddrunner.logging.run_logger as run_logger
import bddrunner.runner as runner


def _events(path: _pathlib.Path) -> list[dict]:
    return [_json.loads(line) for line in path.read_text().splitlines()]


class TestRunLogger:
    """Tests for the JSONL run log."""

    def test_disabled_logger_writes_nothing(self, tmp_path: _pathlib.Path) -> None:
        logger = run_logger.RunLogger(log_dir=tmp_path, enabled=False)
        logger.log_run_start(1, False)
        logger.close()

        assert not logger.enabled
        assert logger.file_path is None
        assert list(tmp_path.iterdir()) == []

    def test_auto_named_file_in_log_dir(self, tmp_path: _pathlib.Path) -> None:
        with run_logger.RunLogger(log_dir=tmp_path / "logs") as logger:
            logger.log_run_start(2, True)

        assert logger.file_path is not None
        assert logger.file_path.parent == tmp_path / "logs"
        assert logger.file_path.name == f"bddrunner_{logger.run_id}.jsonl"
        (event,) = _events(logger.file_path)
        assert event["event_type"] == "run_start"
        assert event["suite_count"] == 2
        assert event["has_focus_nodes"] is True
        assert event["event_number"] == 1

    def test_private_mode_restricts_directory(self, tmp_path: _pathlib.Path) -> None:
        log_dir = tmp_path / "private"
        run_logger.RunLogger(log_dir=log_dir, private_mode=True).close()
        assert (log_dir.stat().st_mode & 0o777) == 0o700

    def test_explicit_log_file(self, tmp_path: _pathlib.Path) -> None:
        path = tmp_path / "nested" / "run.jsonl"
        with run_logger.RunLogger(log_file=path) as logger:
            logger.log_node_result("suite test", "failure", "boom")

        assert logger.file_path == path
        (event,) = _events(path)
        assert event == {
            "timestamp": event["timestamp"],
            "event_number": 1,
            "event_type": "node_result",
            "name": "suite test",
            "status": "failure",
            "error": "boom",
        }

    def test_logs_a_full_run(self, tmp_path: _pathlib.Path, builder) -> None:
        def body(suite):
            suite.after_all(lambda env: env.fail("teardown failed"))
            suite.it("passes", lambda env: None)

        builder.describe("suite", body)
        path = tmp_path / "run.jsonl"
        with run_logger.RunLogger(log_file=path) as logger:
            runner.TestRunner.run_plan(builder.build(), environment={}, run_logger=logger)

        events = _events(path)
        types = [event["event_type"] for event in events]
        assert types[0] == "run_start"
        assert types[-1] == "run_end"
        assert "dummy_error" in types

        dummy = next(e for e in events if e["event_type"] == "dummy_error")
        assert dummy["phase"] == "afterAll"
        assert dummy["parent"] == "suite"
        assert dummy["error"].startswith("afterAll hook: teardown failed")

        results = [e for e in events if e["event_type"] == "node_result"]
        assert {"name": "suite passes", "status": "success"}.items() <= results[0].items()
        assert events[-1]["success_count"] == 1
        assert events[-1]["error_count"] == 1
