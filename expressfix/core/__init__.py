"""
Core utilities and configuration for ExpressFix.

This package provides core functionality including logging configuration,
monitoring hooks, error types and the database layer.
"""

from expressfix.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
