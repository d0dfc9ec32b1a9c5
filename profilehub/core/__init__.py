"""
Core utilities and configuration for ProfileHub.

This package provides core functionality including logging configuration,
database setup, and other shared utilities.
"""

from profilehub.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
