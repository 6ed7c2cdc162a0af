"""Data-related exceptions."""
from .base import MarketSentimentError


class DataError(MarketSentimentError):
    """Base exception for data-related errors."""
    pass


class DataValidationError(DataError):
    """Exception raised when data validation fails."""
    pass


class InvalidSignalError(DataValidationError):
    """Raised when stock signals violate the ranking contract (e.g. price <= 0)."""
    pass


class DataNotFoundError(DataError):
    """Exception raised when requested data is not found."""
    pass
