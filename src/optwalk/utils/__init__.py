"""Utility modules for optwalk.

Provides:
- logger: get_logger for logging
"""

from optwalk.utils.logger import get_logger

__all__ = ["get_logger"]
