"""Configuration-related exceptions."""
from .base import MarketSentimentError


class ConfigurationError(MarketSentimentError):
    """Exception raised for configuration-related errors."""
    pass
