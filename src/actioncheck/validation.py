#
# src/actioncheck/validation.py
#
"""
Declared expectations, observed outcomes, and the validator that compares them.
"""

from typing import Any

from attrs import define, field

from actioncheck.compare import compare_values, format_value
from actioncheck.payload import decode_response, parse_function_error
from actioncheck.telemetry import get_logger

log = get_logger("validation")


@define(slots=True)
class Expectations:
    """
    Sparse set of declared expectations.

    A field left as None means "no assertion on this dimension", never
    "expect an empty value".
    """

    status: int | None = field(default=None)
    stdout: str | None = field(default=None)
    stderr: str | None = field(default=None)
    payload: Any = field(default=None)
    exact_payload: bool = field(default=False)
    version: str | None = field(default=None)
    function_error: str | None = field(default=None)


@define(frozen=True, slots=True)
class InvocationFailure:
    """The action could not be invoked, as reported by the transport or process launcher."""

    message: str
    code: str | None = None


@define(slots=True)
class Outcome:
    """The observed result of one execution attempt."""

    status: int | None = field(default=None)
    payload: bytes = field(default=b"")
    stdout: str | None = field(default=None)
    stderr: str | None = field(default=None)
    function_error: str | None = field(default=None)
    version: str | None = field(default=None)
    invocation_error: InvocationFailure | None = field(default=None)
    # False when nothing was invoked at all, so there is nothing to compare.
    launched: bool = field(default=True)
    status_name: str = field(default="status")


def _check_invocation_error(expectations: Expectations, outcome: Outcome) -> list[str]:
    failure = outcome.invocation_error
    if failure is None:
        return []
    explained = expectations.status is not None and outcome.status == expectations.status
    if explained:
        log.debug("Invocation failure explained by declared status", status=outcome.status)
        return []
    return [failure.message]


def _check_version(expectations: Expectations, outcome: Outcome) -> list[str]:
    if expectations.version is None or outcome.version == expectations.version:
        return []
    return [
        f"expected to execute version {format_value(expectations.version)}, "
        f"but executed version {format_value(outcome.version or '')}"
    ]


def _check_status(expectations: Expectations, outcome: Outcome) -> list[str]:
    if expectations.status is None or outcome.status == expectations.status:
        return []
    observed = "none" if outcome.status is None else outcome.status
    return [f"expected {outcome.status_name} {expectations.status}, got {observed}"]


def _check_function_error(expectations: Expectations, outcome: Outcome) -> list[str]:
    expected_message = expectations.function_error
    if expected_message is None:
        if outcome.function_error:
            return [f"expected no function error, got {format_value(outcome.function_error)}"]
        return []

    if not outcome.function_error:
        return [f"expected function error {format_value(expected_message)}, got no error"]

    record = parse_function_error(outcome.payload)
    if record is None:
        return [
            f"expected function error {format_value(expected_message)}, "
            f"got {format_value(outcome.function_error)} with no error record in the response"
        ]
    if record.message != expected_message:
        return [f"expected function error {format_value(expected_message)}, got {format_value(record.message)}"]
    return []


def _check_output(expectations: Expectations, outcome: Outcome) -> list[str]:
    errors: list[str] = []
    if expectations.payload is not None:
        body = decode_response(outcome.payload)
        errors.extend(compare_values("body", expectations.payload, body, expectations.exact_payload))

    for channel in ("stdout", "stderr"):
        expected = getattr(expectations, channel)
        if expected is None:
            continue
        actual = getattr(outcome, channel) or ""
        if actual != expected:
            errors.append(f"expected {channel} {format_value(expected)}, got {format_value(actual)}")
    return errors


# Evaluated in order; earlier mismatches tend to explain later ones.
_OUTCOME_CHECKS = (
    _check_version,
    _check_status,
    _check_function_error,
    _check_output,
)


def validate(expectations: Expectations, outcome: Outcome) -> list[str]:
    """
    Compares an outcome against declared expectations.

    Returns an ordered list of human-readable mismatches; an empty list means
    the outcome satisfied every declared expectation.
    """
    errors = _check_invocation_error(expectations, outcome)
    if not outcome.launched:
        return errors

    for check in _OUTCOME_CHECKS:
        errors.extend(check(expectations, outcome))

    log.debug("Validated outcome", mismatches=len(errors))
    return errors


# 🔼⚙️
