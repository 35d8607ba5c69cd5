#
# src/actioncheck/cases/base.py
#
"""
Shared life cycle for all action test cases: configure, execute, validate, report.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Self

from attrs import define, field

from actioncheck.payload import RequestPayload
from actioncheck.protocols import ActionKind
from actioncheck.telemetry import get_logger
from actioncheck.validation import Expectations, Outcome, validate

log = get_logger("cases")


@define(frozen=True, slots=True)
class TestResult:
    """
    The outcome of one execution of a test case and the mismatches found in it.
    """
    __test__ = False  # Not a pytest test class.

    test_case: "ActionTestCase" = field(repr=False)
    outcome: Outcome
    errors: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @property
    def passed(self) -> bool:
        return not self.errors


class ActionTestCase(ABC):
    """
    Base class for a single configured action and its declared expectations.

    Builder methods mutate the instance and return it, so a test case can be
    declared in one chained expression. `execute()` may be called repeatedly;
    each call produces a fresh outcome, while the encoded request payload is
    computed only once.
    """

    __test__ = False

    def __init__(self, description: str = ""):
        self._description = description
        self._payload = RequestPayload()
        self.expectations = Expectations()
        self._last_result: TestResult | None = None
        self._lock = threading.RLock()

    # --- Reporting ---
    @property
    @abstractmethod
    def action(self) -> ActionKind: ...

    @property
    @abstractmethod
    def target(self) -> str: ...

    @abstractmethod
    def _default_description(self) -> str: ...

    @property
    def description(self) -> str:
        return self._description or self._default_description()

    @property
    def last_result(self) -> TestResult | None:
        with self._lock:
            return self._last_result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.action.value} {self.target!r}>"

    # --- Configuration ---
    def describe(self, description: str) -> Self:
        self._description = description
        return self

    def _set_payload(self, value: Any) -> None:
        self._payload = RequestPayload(value)

    def encoded_payload(self) -> bytes:
        """Returns the request bytes, resolving the payload on first use."""
        return self._payload.encode()

    # --- Execution ---
    @abstractmethod
    def _perform(self) -> Outcome:
        """
        Performs the action and captures what happened.

        Raises:
            ActionCheckError: for configuration, encoding and execution failures.
        """
        ...

    def execute(self) -> TestResult:
        """
        Performs the action and validates the outcome against the expectations.

        Raises:
            ConfigurationError: the test case cannot run as configured.
            EncodingError: the request payload could not be encoded.
            ExecutionError: the invocation mechanism itself failed.
        """
        with self._lock:
            case_log = log.bind(action=self.action.value, target=self.target)
            case_log.debug("Executing test case", description=self.description)

            outcome = self._perform()
            errors = validate(self.expectations, outcome)
            result = TestResult(test_case=self, outcome=outcome, errors=errors)
            self._last_result = result

            case_log.debug("Test case finished", passed=result.passed, mismatches=len(errors))
            return result


# 🔼⚙️
