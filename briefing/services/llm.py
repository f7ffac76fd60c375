"""
LLM Service Module.

This module provides the LLMService class, which interfaces with the Google Gemini API
to turn the articles scraped from the dashboard into a strategic briefing.
"""

import logging
from typing import Optional
from google import genai

from briefing.errors import ConfigurationError, SummarizationError

logger = logging.getLogger(__name__)


class LLMService:
    """
    Service for interacting with the Google Gemini API.

    This class handles the initialization of the Gemini client and asks the
    model for a Markdown briefing over the pre-parsed dashboard articles.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.5-flash",
        max_output_tokens: int = 1000,
    ):
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.client: Optional[genai.Client] = None
        if not api_key:
            logger.warning("GOOGLE_API_KEY not set. Summaries cannot be generated.")
            return
        try:
            self.client = genai.Client(api_key=api_key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Failed to initialize Gemini client: %s", e)
            self.client = None

    _SYSTEM_PROMPT = """
        You are a senior strategic analyst specializing in AdTech, Marketing, and Enterprise Technology.
        Your task is to analyze the following CLEAN news articles. The data is pre-parsed; only focus on the content.

        1. **ANALYZE** the {article_count} articles provided below.
        2. **GENERATE** a strategic summary in Markdown format.
        3. **CRITICAL**: For every key trend and takeaway, cite the story by title and include the URL in parentheses at the end of the citation.

        Output Format:
        - A short "Key Trends" section (3-5 bullets).
        - A "Strategic Takeaways" section with one bullet per implication for the business.
        - Do not invent stories or URLs that are not in the data.
        ---
        CLEAN News Data to Analyze:
        ---
        {news_data}
        """

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def build_prompt(self, news_data: str, article_count: int) -> str:
        """Returns the prompt for the Gemini briefing."""
        return self._SYSTEM_PROMPT.format(
            article_count=article_count, news_data=news_data
        )

    def summarize(self, news_data: str, article_count: int) -> str:
        """Asks Gemini for a briefing over the extracted news data."""
        if not self.client:
            raise ConfigurationError(
                "Gemini client is not configured. Set GOOGLE_API_KEY."
            )

        logger.info(
            "Asking Gemini (%s) to summarize %d articles...", self.model, article_count
        )
        prompt = self.build_prompt(news_data, article_count)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config={"max_output_tokens": self.max_output_tokens},
            )
            text = response.text
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise SummarizationError("Gemini API call failed") from e

        summary = (text or "").strip()
        if not summary:
            logger.error("Gemini returned an empty response.")
            raise SummarizationError("Gemini returned an empty response")
        return summary
