"""Publisher trust lookup for news sources."""
from typing import Optional

from .sentiment_tables import (
    TRUSTED_SOURCES,
    SOURCE_ALIASES,
    UNRATED_SOURCE_TRUST,
    DISPLAY_DEFAULT_TRUST,
    COMPANY_NEWS_DEFAULT_TRUST,
)

_STRIP_TOKENS = ("https://", "http://", "www.", ".com")


def normalize_source(source: Optional[str]) -> str:
    """Reduce a source name or URL to a bare lowercase token, e.g. ``"reuters"``."""
    cleaned = (source or "").lower()
    for token in _STRIP_TOKENS:
        cleaned = cleaned.replace(token, "")
    return cleaned.strip()


def canonical_source(source: Optional[str]) -> Optional[str]:
    """Canonical publisher name for ``source``, or None if no alias matches.

    Aliases are matched by substring in the fixed order of SOURCE_ALIASES,
    so a short key can still claim an unrelated name that happens to
    contain it ("microsoft" contains "ft").
    """
    cleaned = normalize_source(source)
    if not cleaned:
        return None
    for key, name in SOURCE_ALIASES:
        if key in cleaned:
            return name
    return None


def news_display_trust(source: Optional[str]) -> float:
    """Trust weight used when scoring articles for display."""
    name = canonical_source(source)
    if name is None:
        return DISPLAY_DEFAULT_TRUST
    return TRUSTED_SOURCES.get(name, UNRATED_SOURCE_TRUST)


def company_news_trust(source: Optional[str]) -> float:
    """Trust weight on the company-news feed: the provider name must match exactly, whitespace included."""
    return TRUSTED_SOURCES.get(source, COMPANY_NEWS_DEFAULT_TRUST)
