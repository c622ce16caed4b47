"""Utility modules for Llano.

Provides:
- logger: get_logger for logging
"""

from llano.utils.logger import get_logger

__all__ = [
    "get_logger",
]
