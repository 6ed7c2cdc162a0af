"""Domain services for the market sentiment application."""
from .sentiment_scoring_service import (
    ContextualSentimentScorer,
    SimpleNewsSentiment,
    simple_news_sentiment,
    quantize,
)
from .source_trust import news_display_trust, company_news_trust, canonical_source
from .stock_ranking_service import (
    StockRanker,
    build_ranked,
    is_valid_price,
    rank_sector,
    rank_top_picks,
    composite_score,
    sector_score,
)

__all__ = [
    'ContextualSentimentScorer',
    'SimpleNewsSentiment',
    'simple_news_sentiment',
    'quantize',
    'news_display_trust',
    'company_news_trust',
    'canonical_source',
    'StockRanker',
    'build_ranked',
    'is_valid_price',
    'rank_sector',
    'rank_top_picks',
    'composite_score',
    'sector_score'
]
