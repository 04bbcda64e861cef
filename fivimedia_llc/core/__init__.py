"""
Core utilities and configuration for FiviMedia LLC.

This package provides core functionality including logging configuration,
monitoring, error types, database setup, and other shared utilities.
"""

from fivimedia_llc.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
