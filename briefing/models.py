"""
Data models for the News Briefing proxy.
"""

from typing import TypedDict, Union


class Article(TypedDict):
    """Type definition for an article scraped from a dashboard news card."""

    title: str
    url: str
    summary: str


class CacheRecord(TypedDict):
    """The single persisted summary record."""

    summary: str
    timestamp: str  # ISO-8601, UTC
    ttlHours: Union[int, float]


class SummaryResult(TypedDict):
    """What the summarize endpoint returns on success."""

    summary: str
    timestamp: str
    isCached: bool
