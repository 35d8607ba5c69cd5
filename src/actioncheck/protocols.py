#
# src/actioncheck/protocols.py
#
"""
Defines protocols and data structures shared by test cases and their collaborators.
"""
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from attrs import define, field

if TYPE_CHECKING:
    from actioncheck.cases.base import TestResult


class ActionKind(Enum):
    """The kind of action a test case performs."""

    EXEC = "EXEC"  # Run a local process.
    INVOKE = "INVOKE"  # Invoke a remote function by name or ARN.
    HANDLE = "HANDLE"  # Call an in-process handler.


@runtime_checkable
class TestCase(Protocol):
    """What a host test runner needs from a single test case."""

    @property
    def description(self) -> str: ...

    @property
    def action(self) -> ActionKind: ...

    @property
    def target(self) -> str: ...

    def execute(self) -> "TestResult":
        """
        Runs the action and validates the outcome.

        Raises:
            ActionCheckError: when the test case cannot produce an outcome at all.
        """
        ...


@define(frozen=True, slots=True)
class ProcessSpec:
    """Everything needed to start a local process."""

    path: str
    args: tuple[str, ...] = field(factory=tuple, converter=tuple)
    env: Mapping[str, str] = field(factory=dict)
    cwd: Path | None = None
    stdin: bytes = b""


@define(frozen=True, slots=True)
class ProcessResult:
    """
    Structured result from a finished process.
    """
    exit_code: int
    stdout: str
    stderr: str


@runtime_checkable
class ProcessRunner(Protocol):
    """
    Protocol for something that can run a local process to completion.
    """
    def run(self, spec: ProcessSpec) -> ProcessResult:
        """
        Runs the process described by `spec` and captures its output.

        Raises:
            LaunchError: if the program could not be started at all.
        """
        ...


@runtime_checkable
class LambdaAPI(Protocol):
    """The subset of a boto3 Lambda client used to invoke functions."""

    def invoke(self, **kwargs: Any) -> Mapping[str, Any]: ...


# 🔼⚙️
