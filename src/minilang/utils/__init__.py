"""Utility modules for MiniLang.

Provides:
- logger: get_logger for logging
"""

from minilang.utils.logger import get_logger

__all__ = [
    "get_logger",
]
