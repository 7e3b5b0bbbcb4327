"""Utility modules for plume.

Provides:
- logger: get_logger for logging
"""

from plume.utils.logger import get_logger

__all__ = ["get_logger"]
