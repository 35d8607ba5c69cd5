#
# src/actioncheck/config.py
#
"""
Attrs-based configuration for running test cases.
"""

import logging
from typing import Any

from attrs import define, field


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging.getLevelNamesMapping().keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


@define(frozen=True, slots=True)
class RunnerConfig:
    """Settings for a TestRunner."""

    continue_on_failure: bool = field(default=True)
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


# 🔼⚙️
