"""Logging utilities for the market sentiment application."""
from .logger import (
    get_logger,
    setup_logging,
    LoggerMixin,
    get_contextual_logger,
    timed_operation,
)

__all__ = ['get_logger', 'setup_logging', 'LoggerMixin', 'get_contextual_logger', 'timed_operation']
