"""Custom exceptions for the market sentiment application."""
from .base import MarketSentimentError
from .data import DataError, DataValidationError, DataNotFoundError, InvalidSignalError
from .config import ConfigurationError

__all__ = [
    'MarketSentimentError',
    'DataError',
    'DataValidationError',
    'DataNotFoundError',
    'InvalidSignalError',
    'ConfigurationError'
]
