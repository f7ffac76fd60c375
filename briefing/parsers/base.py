"""
Base classes and interfaces for dashboard parsers.

This module defines the contract that all dashboard parsers must follow.
"""

from typing import Protocol, List
from briefing.models import Article


class DashboardParser(Protocol):
    """
    Protocol for dashboard parsers.

    Classes implementing this protocol should be able to turn the raw HTML
    of a news dashboard into a list of Article objects.
    """

    def parse(self, html_content: str) -> List[Article]:
        """Parses dashboard HTML into articles."""
