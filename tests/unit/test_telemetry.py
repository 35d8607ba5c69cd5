#
# tests/unit/test_telemetry.py
#
"""
Tests for the logging processors and setup.
"""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import structlog

from actioncheck.telemetry import get_logger, setup_logging
from actioncheck.telemetry.logger.processors import add_emoji_processor, remove_extra_keys_processor


class TestProcessors:
    def test_emoji_from_key(self) -> None:
        event = add_emoji_processor(None, "info", {"event": "Test case passed", "emoji_key": "pass"})
        assert event["event"] == "✅ Test case passed"

    def test_emoji_from_level(self) -> None:
        event = add_emoji_processor(None, "warning", {"event": "careful", "level": "warning"})
        assert event["event"].startswith("⚠️")

    def test_internal_keys_removed(self) -> None:
        event = remove_extra_keys_processor(None, "info", {"event": "x", "emoji_key": "pass"})
        assert "emoji_key" not in event


class TestSetupLogging:
    def test_file_logging_writes_json(self, tmp_path: Path) -> None:
        log_file = tmp_path / "actioncheck.log"
        setup_logging(level=logging.INFO, log_file=str(log_file), file_only=True)

        structlog.get_logger("tests").info("hello from tests", answer=42)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = next(line for line in lines if "hello from tests" in line["event"])
        assert record["answer"] == 42
        assert record["logger"] == "tests"

    def test_library_loggers_reach_configured_handlers(self, tmp_path: Path) -> None:
        log_file = tmp_path / "actioncheck.log"
        setup_logging(level=logging.INFO, log_file=str(log_file), file_only=True)

        get_logger("cases").info("library event", answer=7)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = next(line for line in lines if "library event" in line["event"])
        assert record["logger"] == "actioncheck.cases"
        assert record["answer"] == 7


class TestUnconfiguredLogging:
    def test_execute_is_silent_without_logging_setup(self) -> None:
        """Runs test cases in a fresh interpreter where nothing has configured logging."""
        script = "\n".join(
            [
                "from actioncheck.cases import FunctionContext",
                "from actioncheck.runner import TestRunner",
                "FunctionContext.empty().handle(lambda event, context: {'a': 1}).expect_payload({'a': 1}).execute()",
                "TestRunner().run([FunctionContext.empty().invoke('missing-client')])",
            ]
        )
        src_dir = Path(__file__).resolve().parents[2] / "src"
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src_dir), env.get("PYTHONPATH")]))

        completed = subprocess.run(
            [sys.executable, "-c", script], capture_output=True, text=True, env=env, check=False
        )

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout == ""
        assert completed.stderr == ""
