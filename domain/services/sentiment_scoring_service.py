"""Financial news sentiment scoring.

Two independent strategies live here:

* ``ContextualSentimentScorer`` blends a baseline text sentiment with
  financial-impact patterns, business events and market-position phrases
  (falling back to a general keyword lexicon) and quantizes the result into
  five buckets. Used when scoring articles for display.
* ``SimpleNewsSentiment`` counts whole-word bullish/bearish keywords around
  a neutral 0.5. Used on the company-news feed.
"""
import math
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..entities.news import TextSentimentInput, SentimentResult, SentimentLabel
from .sentiment_tables import (
    FINANCIAL_PATTERNS,
    BUSINESS_EVENTS,
    MARKET_POSITION_PHRASES,
    SENTIMENT_KEYWORDS,
    BULLISH_KEYWORDS,
    BEARISH_KEYWORDS,
)
from .source_trust import news_display_trust
from shared.config import get_settings
from shared.config.settings import ScoringSettings
from shared.logging import LoggerMixin

HEADLINE_WEIGHT = 0.6
SUMMARY_WEIGHT = 0.4
BASELINE_WEIGHT = 0.3
CONTEXT_WEIGHT = 0.7

BaselineSentiment = Callable[[str], float]


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def quantize(score: float) -> float:
    """Collapse a 0..1 score onto the midpoint of its fifth."""
    if 0.8 <= score <= 1.0:
        return 0.9
    elif 0.6 <= score < 0.8:
        return 0.7
    elif 0.4 <= score < 0.6:
        return 0.5
    elif 0.2 <= score < 0.4:
        return 0.3
    elif 0.0 <= score < 0.2:
        return 0.1
    return 0.5


@dataclass
class ContextBreakdown:
    """Contextual evidence found in one text."""
    context_score: float = 0.0
    context_factors: int = 0
    matches: List[Tuple[str, float]] = field(default_factory=list)
    used_lexicon: bool = False

    def add(self, phrase: str, weight: float) -> None:
        self.context_score += weight
        self.context_factors += 1
        self.matches.append((phrase, weight))


class ContextualSentimentScorer(LoggerMixin):
    """Pattern-based financial sentiment with a pluggable baseline."""

    def __init__(
        self,
        baseline: Optional[BaselineSentiment] = None,
        rng: Optional[random.Random] = None,
        settings: Optional[ScoringSettings] = None
    ):
        """
        Args:
            baseline: Callable returning a general sentiment in [-1, 1] for a
                text. Defaults to ``BaselineSentimentAnalyzer``.
            rng: Source of the fallback randomness, anything with
                ``uniform(a, b)``. Defaults to ``random.Random`` seeded from
                ``settings.random_seed``.
            settings: Scoring settings; the global settings when omitted.
        """
        self.settings = settings or get_settings().scoring
        if baseline is None:
            from .baseline_sentiment import BaselineSentimentAnalyzer
            baseline = BaselineSentimentAnalyzer(self.settings).analyze
        self.baseline = baseline
        self.rng = rng if rng is not None else random.Random(self.settings.random_seed)

    def score(self, headline: str, summary: str, source: str = "") -> SentimentResult:
        """Score one article. The trust score uses the display-path defaults."""
        return self.score_input(TextSentimentInput(headline, summary, source))

    def score_input(self, item: TextSentimentInput) -> SentimentResult:
        nlp_score = self.baseline_score(item.headline, item.summary)
        breakdown = self.analyze_context(item.text)

        if breakdown.context_factors > 0:
            normalized_context = (
                breakdown.context_score / math.sqrt(breakdown.context_factors)
            ) * CONTEXT_WEIGHT
        else:
            spread = self.settings.fallback_range
            normalized_context = self.rng.uniform(-spread, spread)
            self.logger.debug(f"No sentiment evidence in {item.headline!r}, using random context")

        combined = clamp(nlp_score * BASELINE_WEIGHT + normalized_context, -1.0, 1.0)
        bucket = quantize((combined + 1.0) / 2.0)

        self.logger.debug(
            f"Scored {item.headline!r}: nlp={nlp_score:.3f} "
            f"context={breakdown.context_score:.3f}/{breakdown.context_factors} -> {bucket}"
        )
        return SentimentResult(
            score=bucket,
            label=SentimentLabel.from_score(bucket),
            trust_score=news_display_trust(item.source)
        )

    def baseline_score(self, headline: str, summary: str) -> float:
        """Headline-weighted blend of the baseline sentiment of both parts."""
        headline_value = clamp(float(self.baseline(headline)), -1.0, 1.0)
        summary_value = clamp(float(self.baseline(summary)), -1.0, 1.0)
        return headline_value * HEADLINE_WEIGHT + summary_value * SUMMARY_WEIGHT

    def analyze_context(self, text: str) -> ContextBreakdown:
        """Collect contextual matches from an already lowercased text."""
        breakdown = ContextBreakdown()

        for pattern, weight in FINANCIAL_PATTERNS:
            if pattern.search(text):
                breakdown.add(pattern.pattern, weight)

        for phrase, weight in BUSINESS_EVENTS:
            if phrase in text:
                breakdown.add(phrase, weight)

        for phrase, weight in MARKET_POSITION_PHRASES:
            if phrase in text:
                breakdown.add(phrase, weight)

        if breakdown.context_factors == 0:
            breakdown.used_lexicon = True
            for phrase, weight in SENTIMENT_KEYWORDS:
                if phrase in text:
                    breakdown.add(phrase, weight)

        return breakdown


class SimpleNewsSentiment:
    """Whole-word keyword counting around a neutral 0.5."""

    STEP = 0.1
    NEUTRAL = 0.5

    def __init__(self, bullish=BULLISH_KEYWORDS, bearish=BEARISH_KEYWORDS):
        self.bullish = frozenset(bullish)
        self.bearish = frozenset(bearish)

    def score(self, headline: str, summary: str) -> float:
        """Return a sentiment in [0, 1]; 0.5 when no keyword occurs."""
        text = f"{headline or ''} {summary or ''}".lower()
        sentiment = self.NEUTRAL
        for word in text.split():
            if word in self.bullish:
                sentiment += self.STEP
            elif word in self.bearish:
                sentiment -= self.STEP
        return clamp(sentiment, 0.0, 1.0)


_simple = SimpleNewsSentiment()


def simple_news_sentiment(headline: str, summary: str) -> float:
    return _simple.score(headline, summary)
