"""Unit tests for the briefing workflow."""

import unittest
from unittest.mock import MagicMock

from briefing.errors import ConfigurationError, NoContentError, SummarizationError
from briefing.services.briefing import BriefingService

CARD = (
    '<div class="news-card"><h3><a href="https://a.com">Title</a></h3>'
    '<p class="summary">Body</p></div>'
)


class TestBriefingService(unittest.TestCase):
    def setUp(self):
        self.cache = MagicMock()
        self.cache.get_cached.return_value = None
        self.cache.save_cached.side_effect = lambda summary: {
            "summary": summary,
            "timestamp": "2024-05-01T12:00:00.000Z",
            "ttlHours": 4,
        }
        self.llm = MagicMock()
        self.llm.is_configured = True
        self.llm.summarize.return_value = "briefing"
        self.service = BriefingService(self.cache, self.llm)

    def test_cache_hit_short_circuits(self):
        self.cache.get_cached.return_value = {
            "summary": "cached",
            "timestamp": "2024-05-01T10:00:00.000Z",
            "ttlHours": 4,
        }
        self.llm.is_configured = False

        result = self.service.summarize(None)

        self.assertEqual(
            result,
            {
                "summary": "cached",
                "timestamp": "2024-05-01T10:00:00.000Z",
                "isCached": True,
            },
        )
        self.llm.summarize.assert_not_called()
        self.cache.save_cached.assert_not_called()

    def test_miss_generates_and_saves(self):
        result = self.service.summarize(CARD + CARD)

        args, _ = self.llm.summarize.call_args
        news_data, count = args
        self.assertEqual(count, 2)
        self.assertIn("[ARTICLE 2]", news_data)
        self.cache.save_cached.assert_called_once_with("briefing")
        self.assertFalse(result["isCached"])
        self.assertEqual(result["timestamp"], "2024-05-01T12:00:00.000Z")

    def test_empty_extraction_raises(self):
        with self.assertRaises(NoContentError):
            self.service.summarize("<p>nothing</p>")
        self.llm.summarize.assert_not_called()

    def test_missing_configuration_raises(self):
        self.llm.is_configured = False
        with self.assertRaises(ConfigurationError):
            self.service.summarize(CARD)

    def test_failure_does_not_save(self):
        self.llm.summarize.side_effect = SummarizationError("boom")
        with self.assertRaises(SummarizationError):
            self.service.summarize(CARD)
        self.cache.save_cached.assert_not_called()

    def test_missing_configuration_checked_after_extraction(self):
        self.llm.is_configured = False
        with self.assertRaises(NoContentError):
            self.service.summarize("")

    def test_cache_write_error_raises_summarization_error(self):
        self.cache.save_cached.side_effect = IsADirectoryError("is a directory")
        with self.assertRaises(SummarizationError) as ctx:
            self.service.summarize(CARD)
        self.assertIsInstance(ctx.exception.__cause__, OSError)


if __name__ == "__main__":
    unittest.main()
