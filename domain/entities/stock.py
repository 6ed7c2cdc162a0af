"""Stock-related domain entities."""
import dataclasses
import math
from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum


class Timeframe(Enum):
    """Horizon of the trend a price target was projected from."""
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    TWELVE_MONTHS = "12M"


@dataclass(frozen=True)
class AnalystRecommendation:
    """Analyst recommendation counts for one symbol."""
    strong_buy: int = 0
    buy: int = 0
    hold: int = 0
    sell: int = 0
    strong_sell: int = 0

    def __post_init__(self):
        if min(self.strong_buy, self.buy, self.hold, self.sell, self.strong_sell) < 0:
            raise ValueError("Recommendation counts cannot be negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalystRecommendation':
        """Build from a provider payload (``strongBuy``/``strongSell`` camelCase keys)."""
        return cls(
            strong_buy=int(data.get('strongBuy') or 0),
            buy=int(data.get('buy') or 0),
            hold=int(data.get('hold') or 0),
            sell=int(data.get('sell') or 0),
            strong_sell=int(data.get('strongSell') or 0)
        )

    @property
    def total(self) -> int:
        return self.strong_buy + self.buy + self.hold + self.sell + self.strong_sell

    @property
    def bullish_score(self) -> float:
        """Weighted 0-100 score; 50.0 when there are no recommendations at all."""
        total = self.total
        if total == 0:
            return 50.0
        weighted = (self.strong_buy * 100 +
                    self.buy * 75 +
                    self.hold * 50 +
                    self.sell * 25 +
                    self.strong_sell * 0)
        return weighted / total


@dataclass(frozen=True)
class StockSignals:
    """Raw per-symbol signals gathered by the fetch layer."""
    symbol: str
    price: float
    fundamental_score: float  # 0-100
    short_term_sentiment: float  # 0-100
    long_term_sentiment: float  # 0-100
    company_name: Optional[str] = None
    sector: Optional[str] = None
    pe_ratio: Optional[float] = None
    debt_to_equity: Optional[float] = None
    roe: Optional[float] = None
    cash_flow: Optional[float] = None

    def __post_init__(self):
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Stock symbol cannot be empty")
        object.__setattr__(self, 'symbol', self.symbol.upper().strip())

    @classmethod
    def from_sources(
        cls,
        symbol: str,
        price: float,
        recommendation: AnalystRecommendation,
        bullish_percent: float,
        **profile
    ) -> 'StockSignals':
        """Combine a quote, analyst counts and social bullishness into signals.

        The analyst score feeds both the fundamental and the long-term
        sentiment; ``bullish_percent`` is the short-term sentiment.
        """
        analyst_score = recommendation.bullish_score
        return cls(
            symbol=symbol,
            price=price,
            fundamental_score=analyst_score,
            short_term_sentiment=bullish_percent,
            long_term_sentiment=analyst_score,
            **profile
        )


@dataclass(frozen=True)
class RankedStock:
    """Signals plus the trend projections derived from them.

    Everything except ``price`` is fixed when the record is built; live
    price ticks go through ``with_price`` and never recompute the trends,
    the target or the composite score.
    """
    signals: StockSignals
    price: float
    short_term_trend: float
    medium_term_trend: float
    long_term_trend: float
    five_year_trend: float
    price_target: float
    timeframe: Timeframe
    composite_score: float

    @property
    def symbol(self) -> str:
        return self.signals.symbol

    @property
    def fundamental_score(self) -> float:
        return self.signals.fundamental_score

    @property
    def short_term_sentiment(self) -> float:
        return self.signals.short_term_sentiment

    @property
    def long_term_sentiment(self) -> float:
        return self.signals.long_term_sentiment

    @property
    def price_target_potential(self) -> float:
        """Percent move from the current price to the frozen price target."""
        return ((self.price_target - self.price) / self.price) * 100

    def with_price(self, new_price: float) -> 'RankedStock':
        """Copy of this stock at a new live price."""
        if not new_price > 0 or not math.isfinite(new_price):
            raise ValueError("Price must be a positive finite number")
        return dataclasses.replace(self, price=new_price)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "company_name": self.signals.company_name,
            "sector": self.signals.sector,
            "price": self.price,
            "fundamental_score": self.fundamental_score,
            "short_term_sentiment": self.short_term_sentiment,
            "long_term_sentiment": self.long_term_sentiment,
            "short_term_trend": self.short_term_trend,
            "medium_term_trend": self.medium_term_trend,
            "long_term_trend": self.long_term_trend,
            "five_year_trend": self.five_year_trend,
            "price_target": self.price_target,
            "timeframe": self.timeframe.value,
            "price_target_potential": self.price_target_potential,
            "composite_score": self.composite_score,
        }
