"""Shared utilities for mdit-mention."""

from mdit_mention.utils.logger import enable_debug_logging, get_logger

__all__ = ["enable_debug_logging", "get_logger"]
