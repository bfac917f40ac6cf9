"""Utility modules for PolicyScript.

Provides:
- logger: get_logger for logging
"""

from policyscript.utils.logger import get_logger

__all__ = ["get_logger"]
