"""Utility modules for mathseg.

Provides:
- logger: get_logger for logging
"""

from mathseg.utils.logger import get_logger

__all__ = [
    "get_logger",
]
