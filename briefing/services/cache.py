"""
Summary cache service.

This module provides the SummaryCache class, which keeps the last generated
briefing in a single JSON file and decides at read time whether it is still
fresh enough to serve.
"""

import datetime
import json
import logging
import os
from typing import Optional

from briefing.models import CacheRecord

logger = logging.getLogger(__name__)


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def format_timestamp(moment: datetime.datetime) -> str:
    """Formats a UTC datetime as ISO-8601 with milliseconds and a Z suffix."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime.datetime:
    """Parses an ISO-8601 timestamp; naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    return moment


class SummaryCache:
    """File-backed, single-record cache for the generated briefing."""

    def __init__(self, path: str, ttl_hours: float = 4):
        self.path = path
        self.ttl_hours = ttl_hours

    def _read(self) -> CacheRecord:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("cache record is not an object")
        return CacheRecord(
            summary=str(data["summary"]),
            timestamp=str(data["timestamp"]),
            ttlHours=float(data.get("ttlHours", self.ttl_hours)),
        )

    def get_cached(self) -> Optional[CacheRecord]:
        """Returns the stored record if it has not expired, otherwise None."""
        try:
            record = self._read()
            expiration = parse_timestamp(record["timestamp"]) + datetime.timedelta(
                hours=record["ttlHours"]
            )
        except (OSError, ValueError, KeyError, TypeError, OverflowError) as e:
            logger.debug("No usable cache at %s: %s", self.path, e)
            return None

        if utc_now() < expiration:
            logger.info("Serving cached summary from %s.", record["timestamp"])
            return record

        logger.info("Cached summary expired at %s.", format_timestamp(expiration))
        return None

    def save_cached(self, summary: str) -> CacheRecord:
        """Overwrites the cache with a fresh record and returns it."""
        record = CacheRecord(
            summary=summary,
            timestamp=format_timestamp(utc_now()),
            ttlHours=self.ttl_hours,
        )
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(record, f)
        logger.info("Saved summary to cache at %s.", self.path)
        return record
