#
# src/actioncheck/runners/subprocess_runner.py
#
"""
A ProcessRunner that executes commands with the subprocess module.
"""
import shutil
import subprocess

from actioncheck.exceptions import LaunchError
from actioncheck.protocols import ProcessResult, ProcessRunner, ProcessSpec
from actioncheck.telemetry import get_logger

log = get_logger("runners.subprocess")


class SubprocessRunner(ProcessRunner):
    """
    Implements the ProcessRunner protocol by blocking on subprocess.run.
    """
    def run(self, spec: ProcessSpec) -> ProcessResult:
        """
        Executes the command, feeding `spec.stdin` and capturing both output streams.
        """
        runner_log = log.bind(
            command=" ".join((spec.path, *spec.args)),
            working_dir=str(spec.cwd) if spec.cwd else None,
        )
        runner_log.debug("Executing command")

        # Bare names are looked up on our own PATH, not the child's environment.
        executable = shutil.which(spec.path) or spec.path

        try:
            completed = subprocess.run(
                [spec.path, *spec.args],
                executable=executable,
                input=spec.stdin,
                capture_output=True,
                env=dict(spec.env),
                cwd=spec.cwd,
                check=False,
            )
        except OSError as e:
            # FileNotFoundError, PermissionError, NotADirectoryError and friends.
            # Report the path that failed, which may be the working directory.
            failed_path = str(e.filename) if e.filename else spec.path
            reason = (e.strerror or str(e)).lower()
            runner_log.info("Command could not be launched", path=failed_path, reason=reason)
            raise LaunchError(failed_path, reason, details=e) from e

        stdout = completed.stdout.decode("utf-8", errors="replace")
        stderr = completed.stderr.decode("utf-8", errors="replace")

        runner_log.debug(
            "Command finished",
            exit_code=completed.returncode,
            stdout_len=len(stdout),
            stderr_len=len(stderr),
        )

        return ProcessResult(
            exit_code=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )

# 🔼⚙️
