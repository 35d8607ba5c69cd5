#
# src/actioncheck/telemetry/__init__.py
#
"""
Logging setup for actioncheck.
"""
from .logger import StructLogger, get_logger, setup_logging

__all__ = ["StructLogger", "get_logger", "setup_logging"]

# 🔼⚙️
