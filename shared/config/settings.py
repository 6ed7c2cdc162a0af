"""Application settings and configuration values."""
import os
from dataclasses import dataclass
from typing import Optional
import pytz

from ..exceptions import ConfigurationError


@dataclass
class ScoringSettings:
    """Sentiment scoring configuration settings."""
    # None means the fallback randomness is seeded from the OS
    random_seed: Optional[int] = None
    fallback_range: float = 0.3

    # Baseline sentiment models
    use_finbert: bool = False
    use_roberta: bool = False
    max_text_length: int = 2000


@dataclass
class RankingSettings:
    """Stock ranking and fetch fan-out settings."""
    max_workers: int = 10
    top_picks_limit: int = 5
    show_progress: bool = False


@dataclass
class NewsSettings:
    """News feed configuration settings."""
    max_news_items: int = 20


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = 'INFO'
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    @property
    def log_level(self) -> int:
        """Get the numeric log level."""
        import logging
        return getattr(logging, self.level.upper(), logging.INFO)


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == '':
        return None
    return int(value)


@dataclass
class Settings:
    """Main application settings container."""
    scoring: ScoringSettings
    ranking: RankingSettings
    news: NewsSettings
    logging: LoggingSettings

    # General settings
    timezone: str = "US/Eastern"
    environment: str = "development"
    debug: bool = False

    @property
    def tz(self) -> pytz.BaseTzInfo:
        """Get the timezone object."""
        return pytz.timezone(self.timezone)

    @classmethod
    def defaults(cls) -> 'Settings':
        """Create settings with every section at its default."""
        return cls(
            scoring=ScoringSettings(),
            ranking=RankingSettings(),
            news=NewsSettings(),
            logging=LoggingSettings()
        )

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables."""
        try:
            return cls(
                scoring=ScoringSettings(
                    random_seed=_optional_int(os.getenv('SCORING_RANDOM_SEED')),
                    use_finbert=os.getenv('SCORING_USE_FINBERT', 'false').lower() == 'true',
                    use_roberta=os.getenv('SCORING_USE_ROBERTA', 'false').lower() == 'true'
                ),
                ranking=RankingSettings(
                    max_workers=int(os.getenv('RANKING_MAX_WORKERS', '10')),
                    top_picks_limit=int(os.getenv('RANKING_TOP_PICKS_LIMIT', '5')),
                    show_progress=os.getenv('RANKING_SHOW_PROGRESS', 'false').lower() == 'true'
                ),
                news=NewsSettings(
                    max_news_items=int(os.getenv('NEWS_MAX_ITEMS', '20'))
                ),
                logging=LoggingSettings(
                    level=os.getenv('LOG_LEVEL', 'INFO'),
                    file_path=os.getenv('LOG_FILE_PATH'),
                    max_file_size=int(os.getenv('LOG_MAX_SIZE', str(10 * 1024 * 1024)))
                ),
                timezone=os.getenv('TIMEZONE', 'US/Eastern'),
                environment=os.getenv('ENVIRONMENT', 'development'),
                debug=os.getenv('DEBUG', 'false').lower() == 'true'
            )
        except ValueError as e:
            raise ConfigurationError("Invalid numeric setting in environment", {"error": e})

    def validate(self) -> None:
        """Validate configuration settings."""
        errors = []

        if self.scoring.fallback_range < 0:
            errors.append("Scoring fallback_range cannot be negative")

        if self.scoring.max_text_length <= 0:
            errors.append("Scoring max_text_length must be positive")

        if self.ranking.max_workers <= 0:
            errors.append("Ranking max_workers must be positive")

        if self.ranking.top_picks_limit <= 0:
            errors.append("Ranking top_picks_limit must be positive")

        if self.news.max_news_items <= 0:
            errors.append("News max_news_items must be positive")

        # Validate timezone
        try:
            pytz.timezone(self.timezone)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown timezone: {self.timezone}")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")
