"""Application service fetching signals for a sector and keeping the ranked list."""
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional

import pandas as pd
from tqdm import tqdm

from domain.entities.sector import MarketSector
from domain.entities.stock import RankedStock, StockSignals
from domain.services.stock_ranking_service import StockRanker, is_valid_price
from shared.config import get_settings
from shared.config.settings import Settings
from shared.exceptions import DataNotFoundError
from shared.logging import LoggerMixin, get_contextual_logger, timed_operation

SignalsFetcher = Callable[[str], Optional[StockSignals]]

FRAME_COLUMNS = [
    "symbol", "company_name", "sector", "price",
    "fundamental_score", "short_term_sentiment", "long_term_sentiment",
    "short_term_trend", "medium_term_trend", "long_term_trend", "five_year_trend",
    "price_target", "timeframe", "price_target_potential", "composite_score",
]


class SectorRankingService(LoggerMixin):
    """Owns the ranked stock list shown for the selected sector.

    The list is replaced wholesale by each refresh. The only in-place change
    is ``apply_price_update`` from the streaming feed.
    """

    def __init__(
        self,
        fetch_signals: SignalsFetcher,
        ranker: Optional[StockRanker] = None,
        settings: Optional[Settings] = None
    ):
        """
        Args:
            fetch_signals: Returns the signals for one symbol, or None when the
                provider has nothing for it. May raise; failures are per symbol.
            ranker: Ranking strategy, built from the settings when omitted.
            settings: Application settings; the global settings when omitted.
        """
        self.fetch_signals = fetch_signals
        self.settings = settings or get_settings()
        self.ranker = ranker or StockRanker(self.settings.ranking)
        self.stocks: List[RankedStock] = []
        self._lock = threading.Lock()

    def fetch_sector(self, sector: MarketSector) -> List[RankedStock]:
        """Fetch every symbol of ``sector`` concurrently, rank, and hold the result."""
        symbols = sector.symbols
        fetched: Dict[str, RankedStock] = {}
        log = get_contextual_logger(__name__, sector=sector.value)

        with timed_operation(self.logger, f"refresh of {sector.value}"):
            with ThreadPoolExecutor(max_workers=self.settings.ranking.max_workers) as executor:
                futures = {executor.submit(self._fetch_one, symbol): symbol for symbol in symbols}
                progress = tqdm(
                    as_completed(futures),
                    total=len(futures),
                    desc=f"Fetching {sector.value}",
                    disable=not self.settings.ranking.show_progress
                )
                for future in progress:
                    symbol = futures[future]
                    try:
                        fetched[symbol] = future.result()
                    except DataNotFoundError as e:
                        log.warning(f"No data for stock {symbol}: {e}")
                    except Exception as e:
                        log.error(f"Error fetching stock {symbol}: {e}")

        # Completion order is arbitrary; restore universe order before ranking
        stocks = [fetched[symbol] for symbol in symbols if symbol in fetched]
        ranked = self.ranker.rank(stocks, sector)
        self.logger.info(
            f"Ranked {len(ranked)} of {len(symbols)} symbols for {sector.value} "
            f"({len(symbols) - len(stocks)} failed)"
        )

        with self._lock:
            self.stocks = ranked
        return list(ranked)

    def fetch_symbol(self, symbol: str) -> RankedStock:
        """Look up one symbol and replace or append it in the held list."""
        stock = self._fetch_one(symbol.upper().strip())
        with self._lock:
            for index, existing in enumerate(self.stocks):
                if existing.symbol == stock.symbol:
                    self.stocks[index] = stock
                    break
            else:
                self.stocks.append(stock)
        return stock

    def apply_price_update(self, symbol: str, price: float) -> bool:
        """Apply a streamed price to the held stock with ``symbol``.

        Only ``price`` changes; trends, target and scores stay as built.
        Returns False when the symbol is not held or the price is not a positive finite number.
        """
        if not is_valid_price(price):
            self.logger.warning(f"Ignoring invalid price {price!r} for {symbol}")
            return False
        with self._lock:
            for index, stock in enumerate(self.stocks):
                if stock.symbol == symbol.upper():
                    self.stocks[index] = stock.with_price(price)
                    return True
        self.logger.debug(f"Price update for untracked symbol {symbol}")
        return False

    def to_frame(self, stocks: Optional[List[RankedStock]] = None) -> pd.DataFrame:
        """Tabular view of ``stocks`` (the held list by default), ranked from 1."""
        if stocks is None:
            with self._lock:
                stocks = list(self.stocks)
        frame = pd.DataFrame([stock.to_dict() for stock in stocks], columns=FRAME_COLUMNS)
        frame.index = pd.RangeIndex(start=1, stop=len(frame) + 1, name='rank')
        return frame

    def _fetch_one(self, symbol: str) -> RankedStock:
        signals = self.fetch_signals(symbol)
        if signals is None:
            raise DataNotFoundError("No signals returned", {"symbol": symbol})
        return self.ranker.build(signals)
