"""Trend projection and ranking of stocks from their fetched signals."""
import dataclasses
import math
from typing import Iterable, List, Optional

from ..entities.stock import StockSignals, RankedStock, Timeframe
from ..entities.sector import MarketSector
from shared.config import get_settings
from shared.config.settings import RankingSettings
from shared.exceptions import InvalidSignalError
from shared.logging import get_logger

TOP_PICKS_LIMIT = 5

logger = get_logger(__name__)


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def is_valid_price(price) -> bool:
    """True for a finite, positive number; bools and numeric strings are rejected."""
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0


def _select_target(price: float, short: float, medium: float, long: float):
    """Pick the trend with the largest magnitude; ties go to the shorter horizon."""
    if abs(short) >= abs(medium) and abs(short) >= abs(long):
        trend, timeframe = short, Timeframe.ONE_MONTH
    elif abs(medium) >= abs(long):
        trend, timeframe = medium, Timeframe.SIX_MONTHS
    else:
        trend, timeframe = long, Timeframe.TWELVE_MONTHS
    return price * (1 + trend / 100), timeframe


def composite_score(stock: RankedStock) -> float:
    """Top-picks score: fundamentals, capped target potential and both sentiments."""
    return (stock.fundamental_score * 0.3 +
            _clamp(stock.price_target_potential, -100.0, 100.0) * 0.3 +
            stock.short_term_sentiment * 0.2 +
            stock.long_term_sentiment * 0.2)


def sector_score(stock: RankedStock) -> float:
    """Sector-list score: fundamentals blended with uncapped target potential."""
    return stock.fundamental_score * 0.7 + stock.price_target_potential * 0.3


def build_ranked(signals: StockSignals) -> RankedStock:
    """Derive trends, price target and composite score from ``signals``.

    Raises:
        InvalidSignalError: if the price is not a positive number.
    """
    price = signals.price
    if not is_valid_price(price):
        raise InvalidSignalError(
            "Price must be positive to rank a stock",
            {"symbol": signals.symbol, "price": price}
        )

    short_term = (signals.short_term_sentiment - 50) * 0.2
    medium_term = (signals.short_term_sentiment + signals.long_term_sentiment - 100) * 0.3
    long_term = (signals.fundamental_score - 50) * 0.5
    five_year = (signals.long_term_sentiment + signals.fundamental_score - 100) * 1.0

    price_target, timeframe = _select_target(price, short_term, medium_term, long_term)

    stock = RankedStock(
        signals=signals,
        price=price,
        short_term_trend=short_term,
        medium_term_trend=medium_term,
        long_term_trend=long_term,
        five_year_trend=five_year,
        price_target=price_target,
        timeframe=timeframe,
        composite_score=0.0
    )
    # composite depends on the target, so it is filled in once the rest exists
    return dataclasses.replace(stock, composite_score=composite_score(stock))


def rank_sector(stocks: Iterable[RankedStock]) -> List[RankedStock]:
    """Order a sector list by sector score, best first; equal scores by symbol."""
    return sorted(stocks, key=lambda s: (-sector_score(s), s.symbol))


def rank_top_picks(stocks: Iterable[RankedStock], limit: int = TOP_PICKS_LIMIT) -> List[RankedStock]:
    """Best ``limit`` stocks by their stored composite score; equal scores by symbol.

    The stored score is the one computed when the stock was built, so live
    price ticks never reorder the picks.
    """
    ranked = sorted(stocks, key=lambda s: (-s.composite_score, s.symbol))
    return ranked[:limit]


class StockRanker:
    """Builds ranked stocks and orders them for a sector view."""

    def __init__(self, settings: Optional[RankingSettings] = None):
        self.settings = settings or get_settings().ranking

    def build(self, signals: StockSignals) -> RankedStock:
        return build_ranked(signals)

    def build_all(self, signals: Iterable[StockSignals]) -> List[RankedStock]:
        """Build every valid record, dropping and logging those with a bad price."""
        stocks = []
        for item in signals:
            try:
                stocks.append(build_ranked(item))
            except InvalidSignalError as e:
                logger.warning(f"Skipping {item.symbol}: {e}")
        return stocks

    def rank(self, stocks: Iterable[RankedStock], sector: MarketSector) -> List[RankedStock]:
        if sector.is_top_picks:
            return rank_top_picks(stocks, self.settings.top_picks_limit)
        return rank_sector(stocks)
