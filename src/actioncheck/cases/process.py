#
# src/actioncheck/cases/process.py
#
"""
Test cases that run a local process and check its exit code and output.
"""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Self

from attrs import define, field

from actioncheck.cases.base import ActionTestCase
from actioncheck.exceptions import LaunchError
from actioncheck.protocols import ActionKind, ProcessRunner, ProcessSpec
from actioncheck.runners import SubprocessRunner
from actioncheck.telemetry import get_logger
from actioncheck.validation import InvocationFailure, Outcome

log = get_logger("cases.process")


@define(frozen=True, slots=True)
class ProcessTarget:
    path: str
    args: tuple[str, ...] = field(factory=tuple, converter=tuple)

    def __str__(self) -> str:
        return " ".join((self.path, *self.args))


class ProcessContext:
    """
    Defaults shared by process test cases: a base environment and the runner.

    Test cases copy the environment when they are created, so later changes
    to the context do not affect them.
    """

    def __init__(
        self,
        environment: Mapping[str, str] | None = None,
        runner: ProcessRunner | None = None,
    ):
        self.environment: dict[str, str] = dict(environment or {})
        self.runner: ProcessRunner = runner or SubprocessRunner()

    @classmethod
    def default(cls) -> "ProcessContext":
        """A context with an empty base environment and the subprocess runner."""
        return cls()

    def with_env_vars(self, env: Mapping[str, str]) -> Self:
        self.environment.update(env)
        return self

    def with_inherited_environment(self, inherit: bool = True) -> Self:
        """Replaces the base environment with this process's environment, or clears it."""
        self.environment = dict(os.environ) if inherit else {}
        return self

    def run(self, command: str, *description: str) -> "ProcessTestCase":
        return ProcessTestCase(self, command, description=", ".join(description))

    def command(self, argv: Sequence[str], *description: str) -> "ProcessTestCase":
        """Creates a test case from a full argument vector, program first."""
        if not argv:
            raise ValueError("argv must contain at least the program to run")
        test_case = ProcessTestCase(self, argv[0], description=", ".join(description))
        return test_case.with_args(*argv[1:])


class ProcessTestCase(ActionTestCase):
    """Runs a program and checks its exit code, stdout and stderr."""

    def __init__(self, context: ProcessContext, path: str, description: str = ""):
        super().__init__(description)
        self.path = path
        self.args: list[str] = []
        self.env: dict[str, str] = dict(context.environment)
        self.working_dir: Path | None = None
        self._runner = context.runner

    @property
    def action(self) -> ActionKind:
        return ActionKind.EXEC

    @property
    def target(self) -> str:
        return str(ProcessTarget(self.path, self.args))

    def _default_description(self) -> str:
        return self.target

    # --- Builder methods ---
    def with_args(self, *args: str) -> Self:
        self.args.extend(args)
        return self

    def with_env_vars(self, env: Mapping[str, str]) -> Self:
        self.env.update(env)
        return self

    def with_stdin(self, stdin: Any) -> Self:
        """Sets the process input; accepts any payload representation."""
        self._set_payload(stdin)
        return self

    def with_working_dir(self, directory: str | Path) -> Self:
        self.working_dir = Path(directory)
        return self

    def expect_exit_code(self, code: int) -> Self:
        self.expectations.status = code
        return self

    def expect_stdout(self, stdout: str) -> Self:
        self.expectations.stdout = stdout
        return self

    def expect_stderr(self, stderr: str) -> Self:
        self.expectations.stderr = stderr
        return self

    # --- Execution ---
    def _perform(self) -> Outcome:
        spec = ProcessSpec(
            path=self.path,
            args=self.args,
            env=dict(self.env),
            cwd=self.working_dir,
            stdin=self.encoded_payload(),
        )
        try:
            result = self._runner.run(spec)
        except LaunchError as e:
            log.debug("Process failed to launch", target=self.target, reason=e.reason)
            return Outcome(
                invocation_error=InvocationFailure(message=str(e)),
                launched=False,
                status_name="exit code",
            )

        return Outcome(
            status=result.exit_code,
            stdout=result.stdout,
            stderr=result.stderr,
            status_name="exit code",
        )


# 🔼⚙️
