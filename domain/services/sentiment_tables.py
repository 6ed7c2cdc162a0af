"""Static lookup tables used by the sentiment scorers.

All tables are immutable and built once at import time.
"""
import re
from types import MappingProxyType
from typing import Pattern, Tuple

# Publisher trust weights, keyed by canonical publisher name.
TRUSTED_SOURCES = MappingProxyType({
    "Reuters": 0.9,
    "Bloomberg": 0.9,
    "Financial Times": 0.85,
    "Wall Street Journal": 0.85,
    "CNBC": 0.7,
    "MarketWatch": 0.7,
    "Yahoo Finance": 0.6,
    "Seeking Alpha": 0.5,
    "Motley Fool": 0.5,
    "Business Insider": 0.5,
})

# Substring of a normalised source -> canonical publisher, checked in order.
# Longer keys come first; "ft" is last because it also occurs inside
# unrelated names ("microsoft").
SOURCE_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("financial-times", "Financial Times"),
    ("wall-street-journal", "Wall Street Journal"),
    ("businessinsider", "Business Insider"),
    ("seekingalpha", "Seeking Alpha"),
    ("marketwatch", "MarketWatch"),
    ("bloomberg", "Bloomberg"),
    ("thestreet", "TheStreet"),
    ("benzinga", "Benzinga"),
    ("reuters", "Reuters"),
    ("barrons", "Barrons"),
    ("motley", "Motley Fool"),
    ("forbes", "Forbes"),
    ("yahoo", "Yahoo Finance"),
    ("zacks", "Zacks"),
    ("cnbc", "CNBC"),
    ("fool", "Motley Fool"),
    ("wsj", "Wall Street Journal"),
    ("ft", "Financial Times"),
)

# Trust for a recognised publisher that has no entry in TRUSTED_SOURCES
UNRATED_SOURCE_TRUST = 0.5
# Trust for an unrecognised source when scoring articles for display
DISPLAY_DEFAULT_TRUST = 0.3
# Trust for an unrecognised provider name on the company-news feed
COMPANY_NEWS_DEFAULT_TRUST = 0.4


def _compile(patterns) -> Tuple[Tuple[Pattern, float], ...]:
    return tuple((re.compile(pattern, re.IGNORECASE), weight) for pattern, weight in patterns)


FINANCIAL_PATTERNS = _compile((
    (r"revenue (grew|increased|up|higher) by \d+%", 0.15),
    (r"profit (grew|increased|up|higher) by \d+%", 0.15),
    (r"loss of \$?\d+", -0.15),
    (r"revenue (fell|decreased|down|lower) by \d+%", -0.15),
    (r"market share (grew|increased|gained)", 0.12),
    (r"market share (fell|decreased|lost)", -0.12),
    (r"beat.{1,20}estimates", 0.1),
    (r"missed.{1,20}estimates", -0.1),
))

BUSINESS_EVENTS: Tuple[Tuple[str, float], ...] = (
    ("new partnership with", 0.12),
    ("strategic alliance", 0.12),
    ("major contract", 0.15),
    ("lost contract", -0.15),
    ("regulatory approval", 0.18),
    ("regulatory rejection", -0.18),
    ("patent granted", 0.15),
    ("patent rejected", -0.15),
    ("lawsuit filed", -0.12),
    ("settlement reached", 0.08),
    ("ceo resign", -0.15),
    ("new ceo", 0.1),
    ("restructuring", -0.1),
    ("layoffs", -0.12),
    ("expansion into", 0.12),
    ("market exit", -0.12),
)

MARKET_POSITION_PHRASES: Tuple[Tuple[str, float], ...] = (
    ("market leader", 0.12),
    ("competitive advantage", 0.1),
    ("losing market share", -0.12),
    ("strong competition", -0.08),
    ("innovative product", 0.12),
    ("product recall", -0.15),
    ("supply chain issues", -0.1),
    ("increased demand", 0.12),
    ("weak demand", -0.12),
)

# General lexicon, only consulted when no contextual phrase matched.
SENTIMENT_KEYWORDS: Tuple[Tuple[str, float], ...] = (
    # Very bullish
    ("breakthrough", 0.2), ("revolutionary", 0.2), ("skyrocket", 0.2),
    ("patent granted", 0.18), ("major contract", 0.18), ("record high", 0.18),
    ("exceeds expectations", 0.17), ("massive growth", 0.17), ("acquisition", 0.15),
    ("partnership", 0.15), ("new product", 0.15), ("expansion", 0.15),

    # Bullish
    ("beat estimates", 0.14), ("upgrade", 0.14), ("positive outlook", 0.14),
    ("growth", 0.12), ("profit", 0.12), ("outperform", 0.12),
    ("strong demand", 0.12), ("innovation", 0.12), ("market share", 0.12),
    ("revenue up", 0.1), ("earnings beat", 0.1), ("guidance raised", 0.1),
    ("buy rating", 0.1), ("momentum", 0.1), ("recovery", 0.1),
    ("improved margins", 0.08), ("cost reduction", 0.08), ("efficiency", 0.08),

    # Slightly bullish
    ("stable", 0.07), ("steady", 0.07), ("solid", 0.07),
    ("meets expectations", 0.05), ("in-line", 0.05), ("as expected", 0.05),
    ("maintains guidance", 0.03), ("unchanged", 0.03),

    # Very bearish
    ("bankruptcy", -0.2), ("fraud", -0.2), ("investigation", -0.2),
    ("lawsuit", -0.18), ("default", -0.18), ("crash", -0.18),
    ("massive loss", -0.17), ("scandal", -0.17), ("ceo fired", -0.17),
    ("restructuring", -0.15), ("layoffs", -0.15), ("downsizing", -0.15),

    # Bearish
    ("downgrade", -0.14), ("miss estimates", -0.14), ("negative outlook", -0.14),
    ("declining", -0.12), ("loss", -0.12), ("underperform", -0.12),
    ("weak demand", -0.12), ("competition", -0.12), ("market share loss", -0.12),
    ("revenue down", -0.1), ("earnings miss", -0.1), ("guidance lowered", -0.1),
    ("sell rating", -0.1), ("slowdown", -0.1), ("struggle", -0.1),
    ("margin pressure", -0.08), ("cost increase", -0.08), ("inefficiency", -0.08),

    # Slightly bearish
    ("cautious", -0.07), ("uncertain", -0.07), ("challenging", -0.07),
    ("below expectations", -0.05), ("mixed results", -0.05), ("delayed", -0.05),
    ("reviewing options", -0.03), ("regulatory concerns", -0.03),

    # Industry specific, positive
    ("fda approval", 0.2), ("clinical success", 0.18), ("patent", 0.15),
    ("market expansion", 0.15), ("new technology", 0.15), ("ai development", 0.15),
    ("ev adoption", 0.15), ("renewable", 0.12), ("digital transformation", 0.12),

    # Industry specific, negative
    ("clinical failure", -0.2), ("fda rejection", -0.2), ("patent expired", -0.15),
    ("recall", -0.18), ("security breach", -0.18), ("supply chain issues", -0.15),
    ("regulatory hurdle", -0.15), ("obsolete", -0.12), ("market exit", -0.12),
)

# Whole-word keywords for the company-news feed strategy
BULLISH_KEYWORDS = frozenset(
    ["upgrade", "beat", "growth", "positive", "strong", "higher", "success", "profit"])
BEARISH_KEYWORDS = frozenset(
    ["downgrade", "miss", "decline", "negative", "weak", "lower", "loss", "risk"])
