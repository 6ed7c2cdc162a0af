"""News and sentiment domain entities."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from enum import Enum

import pytz


class SentimentLabel(Enum):
    """Five-level sentiment label shown next to an article."""
    VERY_BULLISH = "Very Bullish"
    BULLISH = "Bullish"
    NEUTRAL = "Neutral"
    BEARISH = "Bearish"
    VERY_BEARISH = "Very Bearish"

    @classmethod
    def from_score(cls, score: float) -> 'SentimentLabel':
        """Map a 0..1 sentiment score onto its label."""
        if 0.8 <= score <= 1.0:
            return cls.VERY_BULLISH
        elif 0.6 <= score < 0.8:
            return cls.BULLISH
        elif 0.4 <= score < 0.6:
            return cls.NEUTRAL
        elif 0.2 <= score < 0.4:
            return cls.BEARISH
        return cls.VERY_BEARISH

    @property
    def color(self) -> str:
        """Display colour hint for presentation layers."""
        return _LABEL_COLORS[self]


_LABEL_COLORS = {
    SentimentLabel.VERY_BULLISH: "green",
    SentimentLabel.BULLISH: "mint",
    SentimentLabel.NEUTRAL: "gray",
    SentimentLabel.BEARISH: "orange",
    SentimentLabel.VERY_BEARISH: "red",
}


@dataclass(frozen=True)
class TextSentimentInput:
    """Text of one article handed to a sentiment scorer."""
    headline: str
    summary: str
    source: str = ""

    def __post_init__(self):
        # None from a sparse provider payload is treated as empty text
        object.__setattr__(self, 'headline', self.headline or "")
        object.__setattr__(self, 'summary', self.summary or "")
        object.__setattr__(self, 'source', self.source or "")

    @property
    def text(self) -> str:
        """Lowercased headline and summary joined by a space."""
        return f"{self.headline} {self.summary}".lower()


@dataclass(frozen=True)
class SentimentResult:
    """Outcome of scoring one article."""
    score: float  # one of 0.1, 0.3, 0.5, 0.7, 0.9
    label: SentimentLabel
    trust_score: float  # 0.0 to 1.0

    def __post_init__(self):
        if not (0 <= self.score <= 1):
            raise ValueError("Sentiment score must be between 0.0 and 1.0")
        if not (0 <= self.trust_score <= 1):
            raise ValueError("Trust score must be between 0.0 and 1.0")

    @property
    def is_bullish(self) -> bool:
        return self.label in (SentimentLabel.BULLISH, SentimentLabel.VERY_BULLISH)

    @property
    def is_bearish(self) -> bool:
        return self.label in (SentimentLabel.BEARISH, SentimentLabel.VERY_BEARISH)

    @property
    def color(self) -> str:
        return self.label.color


@dataclass(frozen=True)
class NewsItem:
    """A company news article together with its sentiment and source trust."""
    id: int
    headline: str
    summary: str
    url: str
    published: float  # epoch seconds
    source: str
    sentiment: float
    trust_score: float

    def __post_init__(self):
        if not self.headline or not self.headline.strip():
            raise ValueError("News headline cannot be empty")
        object.__setattr__(self, 'headline', self.headline.strip())
        object.__setattr__(self, 'summary', (self.summary or "").strip())
        object.__setattr__(self, 'source', (self.source or "").strip())

    @property
    def label(self) -> SentimentLabel:
        return SentimentLabel.from_score(self.sentiment)

    def published_at(self, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
        """Publication time as an aware datetime, in ``tz`` (UTC by default)."""
        published = datetime.fromtimestamp(self.published, tz=pytz.utc)
        return published.astimezone(tz) if tz is not None else published

    def formatted_age(self, now: Optional[datetime] = None) -> str:
        """Abbreviated relative age such as ``"5m ago"`` or ``"2d ago"``."""
        now = now or datetime.now(pytz.utc)
        seconds = int((now - self.published_at()).total_seconds())
        if seconds < 0:
            return "just now"
        if seconds < 60:
            return f"{seconds}s ago"
        if seconds < 3600:
            return f"{seconds // 60}m ago"
        if seconds < 86400:
            return f"{seconds // 3600}h ago"
        return f"{seconds // 86400}d ago"
