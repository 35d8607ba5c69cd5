#
# src/actioncheck/exceptions.py
#
"""
Exception hierarchy for actioncheck.

Only unrecoverable conditions are raised. Expectation mismatches are never
exceptions; they are collected on the TestResult.
"""


class ActionCheckError(Exception):
    """Base class for all actioncheck errors."""

    def __init__(self, message: str, target: str | None = None, details: Exception | None = None):
        self.target = target
        self.details = details
        full_message = message
        if target:
            full_message += f" (Target: '{target}')"
        super().__init__(full_message)
        if details is not None:
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ConfigurationError(ActionCheckError):
    """A test case or context was configured in a way that cannot run."""

    pass


class EncodingError(ActionCheckError):
    """The request payload could not be turned into bytes."""

    pass


class LaunchError(ActionCheckError):
    """The local process could not be started at all."""

    def __init__(self, path: str, reason: str, details: Exception | None = None):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}", details=details)


class ExecutionError(ActionCheckError):
    """The action started but the invocation mechanism itself failed."""

    pass


# 🔼⚙️
