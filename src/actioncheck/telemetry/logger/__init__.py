from .base import StructLogger, get_logger, setup_logging

__all__ = ["StructLogger", "get_logger", "setup_logging"]
