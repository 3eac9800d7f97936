"""Utility modules for toylang.

Provides:
- logger: get_logger for logging
"""

from toylang.utils.logger import get_logger

__all__ = [
    "get_logger",
]
