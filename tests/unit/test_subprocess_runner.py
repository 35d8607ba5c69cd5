#
# tests/unit/test_subprocess_runner.py
#
"""
Tests for the subprocess-based ProcessRunner.
"""

import sys
from pathlib import Path

import pytest

from actioncheck.exceptions import LaunchError
from actioncheck.protocols import ProcessRunner, ProcessSpec
from actioncheck.runners import SubprocessRunner


@pytest.fixture
def runner() -> SubprocessRunner:
    return SubprocessRunner()


class TestSubprocessRunner:
    def test_implements_protocol(self, runner: SubprocessRunner) -> None:
        assert isinstance(runner, ProcessRunner)

    def test_captures_both_channels_and_exit_code(self, runner: SubprocessRunner) -> None:
        script = "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(7)"
        result = runner.run(ProcessSpec(path=sys.executable, args=["-c", script]))

        assert result.exit_code == 7
        assert result.stdout == "out"
        assert result.stderr == "err"

    def test_feeds_stdin(self, runner: SubprocessRunner) -> None:
        script = "import sys; sys.stdout.write(sys.stdin.read().upper())"
        result = runner.run(ProcessSpec(path=sys.executable, args=["-c", script], stdin=b"shout"))
        assert result.stdout == "SHOUT"

    def test_missing_program_raises_launch_error(self, runner: SubprocessRunner) -> None:
        with pytest.raises(LaunchError) as exc_info:
            runner.run(ProcessSpec(path="/bin/does-not-exist"))

        assert exc_info.value.path == "/bin/does-not-exist"
        assert exc_info.value.reason == "no such file or directory"
        assert str(exc_info.value) == "/bin/does-not-exist: no such file or directory"

    def test_missing_working_dir_is_reported_against_the_directory(
        self, runner: SubprocessRunner, tmp_path: Path
    ) -> None:
        missing = tmp_path / "missing"
        with pytest.raises(LaunchError) as exc_info:
            runner.run(ProcessSpec(path=sys.executable, cwd=missing))

        assert exc_info.value.path == str(missing)
        assert exc_info.value.reason == "no such file or directory"

    def test_env_is_passed_exactly(self, runner: SubprocessRunner) -> None:
        script = "import os; print(os.environ.get('ONLY_VAR'), os.environ.get('HOME'))"
        result = runner.run(ProcessSpec(path=sys.executable, args=["-c", script], env={"ONLY_VAR": "yes"}))
        assert result.stdout.strip() == "yes None"
