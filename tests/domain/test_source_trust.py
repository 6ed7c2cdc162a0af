import pytest

from domain.services.source_trust import (
    normalize_source,
    canonical_source,
    news_display_trust,
    company_news_trust,
)


@pytest.mark.parametrize("raw, expected", [
    ("https://www.Reuters.com", "reuters"),
    ("http://bloomberg.com/news", "bloomberg/news"),
    ("  CNBC  ", "cnbc"),
    ("", ""),
    (None, ""),
])
def test_normalize_source(raw, expected):
    assert normalize_source(raw) == expected


def test_reuters_by_substring():
    assert canonical_source("reuters.com") == "Reuters"
    assert news_display_trust("reuters.com") == 0.9


@pytest.mark.parametrize("source, expected", [
    ("www.ft.com", 0.85),
    ("financial-times.com", 0.85),
    ("WSJ", 0.85),
    ("finance.yahoo.com", 0.6),
    ("fool.com", 0.5),
    ("seekingalpha.com", 0.5),
    ("marketwatch.com", 0.7),
])
def test_known_publishers(source, expected):
    assert news_display_trust(source) == expected


def test_recognised_but_unrated_publisher():
    assert canonical_source("zacks.com") == "Zacks"
    assert news_display_trust("zacks.com") == 0.5
    assert news_display_trust("Benzinga") == 0.5


def test_unknown_source_display_default():
    assert canonical_source("some-blog.net") is None
    assert news_display_trust("some-blog.net") == 0.3
    assert news_display_trust("") == 0.3


def test_short_alias_claims_unrelated_names():
    # "ft" is checked last but still matches inside "microsoft"
    assert canonical_source("microsoft.com") == "Financial Times"


def test_alias_order_prefers_specific_key():
    assert canonical_source("fool.wsj.example") == "Motley Fool"


def test_company_news_uses_exact_names():
    assert company_news_trust("Reuters") == 0.9
    assert company_news_trust("Bloomberg") == 0.9
    assert company_news_trust(" Bloomberg ") == 0.4
    assert company_news_trust("reuters") == 0.4
    assert company_news_trust("reuters.com") == 0.4
    assert company_news_trust("Zacks") == 0.4
    assert company_news_trust(None) == 0.4
