"""Utility modules for Spanmark.

Provides:
- logger: get_logger for logging
"""

from spanmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
