"""Domain entities for the market sentiment application."""
from .stock import AnalystRecommendation, StockSignals, RankedStock, Timeframe
from .news import TextSentimentInput, SentimentResult, SentimentLabel, NewsItem
from .sector import MarketSector

__all__ = [
    'AnalystRecommendation',
    'StockSignals',
    'RankedStock',
    'Timeframe',
    'TextSentimentInput',
    'SentimentResult',
    'SentimentLabel',
    'NewsItem',
    'MarketSector'
]
