from datetime import datetime, timedelta

import pytest
import pytz

from domain.entities.news import NewsItem, SentimentLabel, SentimentResult, TextSentimentInput
from domain.entities.sector import MarketSector
from domain.entities.stock import AnalystRecommendation, StockSignals


@pytest.mark.parametrize("score, label", [
    (0.9, SentimentLabel.VERY_BULLISH),
    (0.8, SentimentLabel.VERY_BULLISH),
    (0.7, SentimentLabel.BULLISH),
    (0.5, SentimentLabel.NEUTRAL),
    (0.3, SentimentLabel.BEARISH),
    (0.1, SentimentLabel.VERY_BEARISH),
    (0.0, SentimentLabel.VERY_BEARISH),
])
def test_label_from_score(score, label):
    assert SentimentLabel.from_score(score) == label


def test_label_colors():
    assert SentimentLabel.VERY_BULLISH.color == "green"
    assert SentimentLabel.NEUTRAL.color == "gray"
    assert SentimentLabel.VERY_BEARISH.color == "red"
    assert SentimentResult(0.3, SentimentLabel.BEARISH, 0.5).color == "orange"


def test_text_input_joins_and_lowercases():
    item = TextSentimentInput("Apple Beats", "Strong iPhone Sales", "Reuters")
    assert item.text == "apple beats strong iphone sales"
    assert TextSentimentInput(None, None).text == " "


def test_sentiment_result_validation():
    result = SentimentResult(0.7, SentimentLabel.BULLISH, 0.9)
    assert result.is_bullish and not result.is_bearish
    with pytest.raises(ValueError):
        SentimentResult(1.5, SentimentLabel.VERY_BULLISH, 0.5)
    with pytest.raises(ValueError):
        SentimentResult(0.5, SentimentLabel.NEUTRAL, -0.1)


def make_news(**overrides):
    fields = dict(
        id=1, headline="  Apple beats  ", summary=None, url="https://example.com",
        published=1_700_000_000, source=" Reuters ", sentiment=0.7, trust_score=0.9
    )
    fields.update(overrides)
    return NewsItem(**fields)


def test_news_item_cleans_fields():
    item = make_news()
    assert item.headline == "Apple beats"
    assert item.summary == ""
    assert item.source == "Reuters"
    assert item.label == SentimentLabel.BULLISH


def test_news_item_requires_headline():
    with pytest.raises(ValueError):
        make_news(headline="   ")


def test_news_item_timezone():
    item = make_news()
    eastern = pytz.timezone("US/Eastern")
    assert item.published_at().tzinfo == pytz.utc
    assert item.published_at(eastern).utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("delta, expected", [
    (timedelta(seconds=30), "30s ago"),
    (timedelta(minutes=5), "5m ago"),
    (timedelta(hours=3), "3h ago"),
    (timedelta(days=2), "2d ago"),
    (timedelta(seconds=-10), "just now"),
])
def test_news_item_formatted_age(delta, expected):
    item = make_news()
    now = item.published_at() + delta
    assert item.formatted_age(now) == expected


def test_recommendation_bullish_score():
    assert AnalystRecommendation().bullish_score == 50.0
    assert AnalystRecommendation(strong_buy=2, buy=2).bullish_score == 87.5
    assert AnalystRecommendation(hold=1, strong_sell=1).bullish_score == 25.0


def test_recommendation_from_provider_payload():
    rec = AnalystRecommendation.from_dict(
        {"strongBuy": 10, "buy": 5, "hold": 5, "sell": 0, "strongSell": 0, "period": "2024-01-01"})
    assert rec.total == 20
    assert rec.bullish_score == pytest.approx((1000 + 375 + 250) / 20)
    assert AnalystRecommendation.from_dict({}).bullish_score == 50.0


def test_recommendation_rejects_negative_counts():
    with pytest.raises(ValueError):
        AnalystRecommendation(buy=-1)


def test_signals_normalize_symbol():
    signals = StockSignals(" aapl ", 190.0, 60.0, 55.0, 60.0)
    assert signals.symbol == "AAPL"
    assert signals.pe_ratio is None
    with pytest.raises(ValueError):
        StockSignals("", 10.0, 50.0, 50.0, 50.0)


def test_signals_from_sources():
    rec = AnalystRecommendation(strong_buy=1, buy=1)
    signals = StockSignals.from_sources(
        "nvda", 450.0, rec, 58.0, company_name="NVIDIA", sector="Semiconductors")
    assert signals.fundamental_score == 87.5
    assert signals.long_term_sentiment == 87.5
    assert signals.short_term_sentiment == 58.0
    assert signals.company_name == "NVIDIA"


def test_sector_universes():
    assert len(MarketSector.TOP_PICKS.symbols) == 20
    assert MarketSector.TOP_PICKS.is_top_picks
    assert not MarketSector.ENERGY.is_top_picks
    assert "XOM" in MarketSector.ENERGY.symbols
    for sector in MarketSector:
        assert len(set(sector.symbols)) == len(sector.symbols)
