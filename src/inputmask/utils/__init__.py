"""Utility modules for InputMask.

Provides:
- logger: get_logger for logging
"""

from inputmask.utils.logger import get_logger

__all__ = [
    "get_logger",
]
