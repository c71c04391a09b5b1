"""Utility modules for enlace.

Provides:
- logger: get_logger for logging
"""

from enlace.utils.logger import get_logger

__all__ = [
    "get_logger",
]
