#
# src/actioncheck/runners/__init__.py
#
"""
Process-execution collaborators.
"""
from .subprocess_runner import SubprocessRunner

__all__ = ["SubprocessRunner"]

# 🔼⚙️
