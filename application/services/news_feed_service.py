"""Application service turning raw company-news payloads into scored news items."""
import math
from typing import List, Dict, Any, Optional, Iterable

from domain.entities.news import NewsItem
from domain.services.sentiment_scoring_service import (
    ContextualSentimentScorer,
    SimpleNewsSentiment,
)
from domain.services.source_trust import company_news_trust
from shared.config import get_settings
from shared.config.settings import Settings
from shared.logging import LoggerMixin

REQUIRED_KEYS = ('id', 'datetime', 'headline', 'source')
TEXT_KEYS = ('headline', 'summary', 'url', 'source')


class NewsFeedService(LoggerMixin):
    """Scores provider news items for the company-news tab and the news sheet."""

    def __init__(
        self,
        scorer: Optional[ContextualSentimentScorer] = None,
        simple: Optional[SimpleNewsSentiment] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self._scorer = scorer
        self.simple = simple or SimpleNewsSentiment()

    @property
    def scorer(self) -> ContextualSentimentScorer:
        # Built on first use so the company-news path never loads a baseline model
        if self._scorer is None:
            self._scorer = ContextualSentimentScorer(settings=self.settings.scoring)
        return self._scorer

    def company_news(self, raw_items: Iterable[Dict[str, Any]], limit: Optional[int] = None) -> List[NewsItem]:
        """Newest ``limit`` items scored with keyword counting and exact-name trust."""
        items = []
        for raw in self._latest(raw_items, limit):
            headline, summary = raw['headline'], raw.get('summary') or ''
            try:
                items.append(self._build_item(
                    raw,
                    sentiment=self.simple.score(headline, summary),
                    trust_score=company_news_trust(raw['source'])
                ))
            except (TypeError, ValueError) as e:
                self.logger.error(f"Error analyzing news item {raw.get('id')}: {e}")
        self.logger.info(f"Processed {len(items)} company news items")
        return items

    def display_news(self, raw_items: Iterable[Dict[str, Any]], limit: Optional[int] = None) -> List[NewsItem]:
        """Newest ``limit`` items scored with the contextual scorer."""
        items = []
        for raw in self._latest(raw_items, limit):
            try:
                result = self.scorer.score(raw['headline'], raw.get('summary') or '', raw['source'])
                items.append(self._build_item(
                    raw,
                    sentiment=result.score,
                    trust_score=result.trust_score
                ))
            except (TypeError, ValueError) as e:
                self.logger.error(f"Error analyzing news item {raw.get('id')}: {e}")
        self.logger.info(f"Processed {len(items)} display news items")
        return items

    @staticmethod
    def average_sentiment(items: List[NewsItem], weighted: bool = False) -> float:
        """Mean sentiment of ``items``, optionally weighted by source trust; 0.5 if empty."""
        if not items:
            return 0.5
        if not weighted:
            return sum(item.sentiment for item in items) / len(items)
        total_trust = sum(item.trust_score for item in items)
        if total_trust == 0:
            return 0.5
        return sum(item.sentiment * item.trust_score for item in items) / total_trust

    def _latest(self, raw_items: Iterable[Dict[str, Any]], limit: Optional[int]) -> List[Dict[str, Any]]:
        """Drop malformed payloads, then keep the newest ``limit``."""
        valid = []
        for raw in raw_items:
            if not isinstance(raw, dict):
                self.logger.warning(f"Skipping news item of type {type(raw).__name__}")
                continue
            missing = [key for key in REQUIRED_KEYS if raw.get(key) is None]
            if missing:
                self.logger.warning(f"Skipping news item without {', '.join(missing)}")
                continue
            if not all(isinstance(raw.get(key) or '', str) for key in TEXT_KEYS):
                self.logger.warning(f"Skipping news item {raw['id']} with non-text fields")
                continue
            try:
                published = float(raw['datetime'])
                if not math.isfinite(published):
                    raise ValueError(published)
            except (TypeError, ValueError):
                self.logger.warning(f"Skipping news item {raw['id']} with bad datetime {raw['datetime']!r}")
                continue
            valid.append((published, raw))

        if limit is None:
            limit = self.settings.news.max_news_items
        valid.sort(key=lambda pair: pair[0], reverse=True)
        return [raw for _, raw in valid[:limit]]

    @staticmethod
    def _build_item(raw: Dict[str, Any], sentiment: float, trust_score: float) -> NewsItem:
        return NewsItem(
            id=int(raw['id']),
            headline=raw['headline'],
            summary=raw.get('summary') or '',
            url=raw.get('url') or '',
            published=float(raw['datetime']),
            source=raw['source'],
            sentiment=sentiment,
            trust_score=trust_score
        )
