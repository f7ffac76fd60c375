"""
Briefing service.

Ties the cache, the dashboard parser and Gemini together for one summarize
request.
"""

import logging
from typing import Optional

from briefing.errors import ConfigurationError, NoContentError, SummarizationError
from briefing.models import SummaryResult
from briefing.parsers.base import DashboardParser
from briefing.parsers.dashboard import NewsCardParser, format_articles
from briefing.services.cache import SummaryCache
from briefing.services.llm import LLMService

logger = logging.getLogger(__name__)


class BriefingService:
    """Serves the cached briefing, or builds and caches a new one."""

    def __init__(
        self,
        cache: SummaryCache,
        llm: LLMService,
        parser: Optional[DashboardParser] = None,
    ):
        self.cache = cache
        self.llm = llm
        self.parser = parser or NewsCardParser()

    def summarize(self, html_content: Optional[str]) -> SummaryResult:
        # The cache is not keyed on the HTML: a fresh record wins regardless.
        cached = self.cache.get_cached()
        if cached:
            return SummaryResult(
                summary=cached["summary"],
                timestamp=cached["timestamp"],
                isCached=True,
            )

        articles = self.parser.parse(html_content or "")
        news_data = format_articles(articles)
        if not news_data:
            logger.info("Request carried no usable news cards.")
            raise NoContentError("No clean news content found to summarize.")

        if not self.llm.is_configured:
            raise ConfigurationError(
                "Server configuration error: GOOGLE_API_KEY is not set."
            )

        summary = self.llm.summarize(news_data, len(articles))
        try:
            record = self.cache.save_cached(summary)
        except OSError as e:
            logger.error("Failed to write summary cache: %s", e)
            raise SummarizationError("Summary cache write failed") from e
        return SummaryResult(
            summary=summary,
            timestamp=record["timestamp"],
            isCached=False,
        )
