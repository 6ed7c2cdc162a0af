"""Command line entry point: score a headline or rank a file of stock signals."""
import argparse
import json
import random
import sys
from typing import List

from domain.entities.sector import MarketSector
from domain.entities.stock import StockSignals
from domain.services.sentiment_scoring_service import (
    ContextualSentimentScorer,
    simple_news_sentiment,
)
from domain.services.source_trust import company_news_trust
from domain.services.stock_ranking_service import StockRanker
from shared.config import get_settings, setup_logging
from shared.exceptions import MarketSentimentError

NUMERIC_FIELDS = ('price', 'fundamental_score', 'short_term_sentiment', 'long_term_sentiment')


def score_command(args) -> int:
    if args.simple:
        sentiment = simple_news_sentiment(args.headline, args.summary)
        print(f"sentiment={sentiment:.2f} trust={company_news_trust(args.source):.2f}")
        return 0

    settings = get_settings()
    rng = random.Random(args.seed) if args.seed is not None else None
    scorer = ContextualSentimentScorer(rng=rng, settings=settings.scoring)
    result = scorer.score(args.headline, args.summary, args.source)
    print(f"{result.label.value}: score={result.score:.1f} trust={result.trust_score:.2f}")
    return 0


def load_signals(path: str) -> List[StockSignals]:
    """Read a JSON list of signal objects.

    Raises:
        OSError: if the file cannot be read
        ValueError: if it is not valid JSON or an entry is malformed
        TypeError: if an entry has missing or unexpected keys
    """
    with open(path) as f:
        payload = json.load(f)

    if not isinstance(payload, list):
        raise ValueError("expected a list of signal objects")

    signals = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValueError(f"entry {index} is not an object")
        for name in NUMERIC_FIELDS:
            value = item.get(name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"entry {index}: {name} must be a number, got {value!r}")
        signals.append(StockSignals(**item))
    return signals


def rank_command(args) -> int:
    try:
        signals = load_signals(args.path)
    except (OSError, TypeError, ValueError) as e:
        print(f"Invalid signals file: {e}", file=sys.stderr)
        return 2

    ranker = StockRanker(get_settings().ranking)
    sector = MarketSector.TOP_PICKS if args.top_picks else MarketSector(args.sector)
    ranked = ranker.rank(ranker.build_all(signals), sector)

    for position, stock in enumerate(ranked, start=1):
        print(f"{position:>2}. {stock.symbol:<6} price={stock.price:.2f} "
              f"target={stock.price_target:.2f} ({stock.timeframe.value}) "
              f"composite={stock.composite_score:.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Financial news sentiment and stock ranking')
    subparsers = parser.add_subparsers(dest='command', required=True)

    score = subparsers.add_parser('score', help='Score a news headline')
    score.add_argument('headline')
    score.add_argument('summary', nargs='?', default='')
    score.add_argument('-s', '--source', default='', help='Publisher name or URL')
    score.add_argument('--seed', type=int, help='Seed for the no-evidence fallback')
    score.add_argument('--simple', action='store_true', help='Use the company-news keyword strategy')
    score.set_defaults(func=score_command)

    rank = subparsers.add_parser('rank', help='Rank stocks from a JSON list of signals')
    rank.add_argument('path')
    rank.add_argument('-t', '--top-picks', action='store_true', help='Keep only the top picks')
    rank.add_argument('--sector', default=MarketSector.TECHNOLOGY.value,
                      choices=[s.value for s in MarketSector], help='Sector label for the listing')
    rank.set_defaults(func=rank_command)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(stream=sys.stderr)
        return args.func(args)
    except MarketSentimentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
