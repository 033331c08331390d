"""
Logging helpers for formrules.
"""

from .logger import get_logger, log_operation, setup_logger

__all__ = ["get_logger", "log_operation", "setup_logger"]
