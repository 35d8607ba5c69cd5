#
# src/actioncheck/__init__.py
#
"""
actioncheck: declarative outcome verification for process, remote function
and local handler test cases.
"""
from .cases import (
    VERSION_LATEST,
    ActionTestCase,
    FunctionContext,
    FunctionTestCase,
    ProcessContext,
    ProcessTestCase,
    TestResult,
)
from .compare import compare_values
from .config import RunnerConfig
from .exceptions import (
    ActionCheckError,
    ConfigurationError,
    EncodingError,
    ExecutionError,
    LaunchError,
)
from .payload import FunctionError, decode_response, payload_from
from .protocols import ActionKind, TestCase
from .runner import RunSummary, TestRunner
from .validation import Expectations, Outcome, validate

__all__ = [
    "VERSION_LATEST",
    "ActionCheckError",
    "ActionKind",
    "ActionTestCase",
    "ConfigurationError",
    "EncodingError",
    "ExecutionError",
    "Expectations",
    "FunctionContext",
    "FunctionError",
    "FunctionTestCase",
    "LaunchError",
    "Outcome",
    "ProcessContext",
    "ProcessTestCase",
    "RunSummary",
    "RunnerConfig",
    "TestCase",
    "TestResult",
    "TestRunner",
    "compare_values",
    "decode_response",
    "payload_from",
    "validate",
]

# 🔼⚙️
