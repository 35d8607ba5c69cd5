#
# src/actioncheck/cases/__init__.py
#
"""
Action test cases and the contexts that construct them.
"""
from .base import ActionTestCase, TestResult
from .function import (
    VERSION_LATEST,
    FunctionContext,
    FunctionTarget,
    FunctionTestCase,
    HandlerTarget,
)
from .process import ProcessContext, ProcessTarget, ProcessTestCase

__all__ = [
    "VERSION_LATEST",
    "ActionTestCase",
    "FunctionContext",
    "FunctionTarget",
    "FunctionTestCase",
    "HandlerTarget",
    "ProcessContext",
    "ProcessTarget",
    "ProcessTestCase",
    "TestResult",
]

# 🔼⚙️
