"""
News dashboard parser.

This module provides the NewsCardParser class, which pulls articles out of the
``.news-card`` elements rendered by the dashboard, and the helpers that turn
those articles into the text block embedded in the Gemini prompt.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from briefing.models import Article
from briefing.parsers.base import DashboardParser

logger = logging.getLogger(__name__)

SUMMARY_LIMIT = 300


class NewsCardParser(DashboardParser):
    """Parses the news cards of the dashboard page."""

    card_selector = ".news-card"
    link_selector = "h3 a"
    summary_selector = "p.summary"

    def _text(self, elements: List[Tag]) -> str:
        """Joins and trims the text content of every matched element."""
        return "".join(el.get_text() for el in elements).strip()

    def _parse_card(self, card: Tag) -> Optional[Article]:
        links = card.select(self.link_selector)
        title = self._text(links)
        url = str(links[0].get("href") or "#") if links else "#"
        summary = self._text(card.select(self.summary_selector))

        if not title or not summary:
            return None
        return Article(title=title, url=url, summary=summary)

    def parse(self, html_content: str) -> List[Article]:
        """Returns the articles of every complete news card, in page order."""
        if not html_content:
            return []

        soup = BeautifulSoup(html_content, "html.parser")
        articles = []
        for card in soup.select(self.card_selector):
            article = self._parse_card(card)
            if article is not None:
                articles.append(article)

        logger.debug("Parsed %d articles from dashboard HTML.", len(articles))
        return articles


def format_article(index: int, article: Article) -> str:
    """Renders one article as a numbered prompt block."""
    return "\n".join(
        [
            f"[ARTICLE {index}]",
            f"Title: {article['title']}",
            f"URL: {article['url']}",
            f"Summary: {article['summary'][:SUMMARY_LIMIT]}",
            "---",
        ]
    )


def format_articles(articles: List[Article]) -> str:
    """Renders all articles; an empty list gives an empty string."""
    return "\n".join(
        format_article(i, article) for i, article in enumerate(articles, start=1)
    )


def extract(html_content: str, parser: Optional[DashboardParser] = None) -> str:
    """Extracts clean, prompt-ready news data from dashboard HTML."""
    return format_articles((parser or NewsCardParser()).parse(html_content))
