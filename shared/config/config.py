"""Configuration management for the market sentiment application."""
import copy
from typing import Any, Optional

from .settings import Settings
from ..exceptions import ConfigurationError


class Config:
    """Process-wide holder of the validated settings."""

    _instance: Optional['Config'] = None
    _settings: Optional[Settings] = None

    def __new__(cls) -> 'Config':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._settings is None:
            self._load_settings()

    def _load_settings(self) -> None:
        settings = Settings.from_env()
        settings.validate()
        self._settings = settings

    @property
    def settings(self) -> Settings:
        """Get the current settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload(self) -> Settings:
        """Re-read the environment, replacing the current settings."""
        self._settings = None
        self._load_settings()
        return self._settings

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings programmatically.

        Nested sections are addressed with dotted keys, which have to be
        passed through a dict: ``update_settings(**{'ranking.max_workers': 4})``.
        Changes are applied to a copy and only kept when it validates.

        Raises:
            ConfigurationError: on an unknown key or invalid resulting settings
        """
        updated = copy.deepcopy(self.settings)

        for key, value in kwargs.items():
            target, _, name = key.rpartition('.')
            section = getattr(updated, target, None) if target else updated
            if section is None or target.count('.') or not hasattr(section, name):
                raise ConfigurationError("Unknown setting", {"key": key})
            setattr(section, name, value)

        updated.validate()
        self._settings = updated


_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_settings() -> Settings:
    """Get the current settings."""
    return get_config().settings


def get_timezone():
    """Get the configured timezone as a pytz timezone."""
    return get_settings().tz
