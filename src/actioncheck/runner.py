#
# src/actioncheck/runner.py
#
"""
A minimal host runner that executes test cases in order and aggregates results.
"""

import time
from collections.abc import Iterable

from attrs import define, field

from actioncheck.cases.base import TestResult
from actioncheck.config import RunnerConfig
from actioncheck.exceptions import ActionCheckError
from actioncheck.protocols import TestCase
from actioncheck.telemetry import get_logger

log = get_logger("runner")


@define(frozen=True, slots=True)
class CaseReport:
    """What happened when one test case was run."""

    test_case: TestCase = field(repr=False)
    result: TestResult | None = None
    error: ActionCheckError | None = None
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.error is None and self.result is not None and self.result.passed

    @property
    def problems(self) -> list[str]:
        """The unrecoverable error, or the ordered mismatches."""
        if self.error is not None:
            return [str(self.error)]
        return list(self.result.errors) if self.result else []


@define(slots=True)
class RunSummary:
    reports: list[CaseReport] = field(factory=list)
    skipped: int = 0

    @property
    def passed(self) -> int:
        return sum(1 for report in self.reports if report.passed)

    @property
    def failed(self) -> int:
        return sum(1 for report in self.reports if report.error is None and not report.passed)

    @property
    def errored(self) -> int:
        return sum(1 for report in self.reports if report.error is not None)

    @property
    def ok(self) -> bool:
        return all(report.passed for report in self.reports) and not self.skipped


class TestRunner:
    """Runs test cases one after another, optionally stopping at the first failure."""

    __test__ = False

    def __init__(self, config: RunnerConfig | None = None):
        self.config = config or RunnerConfig()

    def run_case(self, test_case: TestCase) -> CaseReport:
        case_log = log.bind(action=test_case.action.value, target=test_case.target)
        started = time.monotonic()
        try:
            result = test_case.execute()
        except ActionCheckError as e:
            duration = time.monotonic() - started
            case_log.warning("Test case could not run", description=test_case.description, error=str(e))
            return CaseReport(test_case=test_case, error=e, duration=duration)

        duration = time.monotonic() - started
        report = CaseReport(test_case=test_case, result=result, duration=duration)
        if report.passed:
            case_log.info("Test case passed", description=test_case.description, emoji_key="pass")
        else:
            case_log.info(
                "Test case failed",
                description=test_case.description,
                mismatches=list(result.errors),
                emoji_key="fail",
            )
        return report

    def run(self, test_cases: Iterable[TestCase]) -> RunSummary:
        cases = list(test_cases)
        summary = RunSummary()
        for index, test_case in enumerate(cases):
            report = self.run_case(test_case)
            summary.reports.append(report)
            if not report.passed and not self.config.continue_on_failure:
                summary.skipped = len(cases) - index - 1
                log.info("Stopping after first failure", skipped=summary.skipped)
                break

        log.info(
            "Test run complete",
            passed=summary.passed,
            failed=summary.failed,
            errored=summary.errored,
            skipped=summary.skipped,
        )
        return summary


# 🔼⚙️
