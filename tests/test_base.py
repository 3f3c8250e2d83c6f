"""Tests for the BaseScraper abstract class."""

import unittest

from product_scraper.base import BaseScraper
from product_scraper.models import FetchedPage, ProductRecord


class DummyScraper(BaseScraper):
    def fetch(self, url):
        return FetchedPage(strategy="dummy", markup="<html></html>")

    def parse(self, page):
        return (ProductRecord(title="Widget"),)


class TestBaseScraperValidation(unittest.TestCase):
    """Verify that BaseScraper.validate() catches invalid URLs."""

    def test_validate_raises_on_empty_url(self):
        """An empty URL should raise ValueError."""
        with self.assertRaises(ValueError) as ctx:
            DummyScraper().validate("")
        self.assertIn("url", str(ctx.exception).lower())

    def test_validate_raises_on_non_http_url(self):
        with self.assertRaises(ValueError):
            DummyScraper().validate("ftp://example.com")

    def test_validate_passes_with_valid_url(self):
        """A valid URL should not raise."""
        DummyScraper().validate("https://example.com")


class TestBaseScraperRun(unittest.TestCase):
    """Verify that BaseScraper.run() handles exceptions gracefully."""

    def test_run_success(self):
        result = DummyScraper().run("https://example.com")
        self.assertTrue(result.success)
        self.assertEqual(result.strategy, "dummy")
        self.assertEqual([p.title for p in result.products], ["Widget"])
        self.assertIsNone(result.error_type)

    def test_run_captures_exception_as_error_type(self):
        """If fetch() raises, run() should return a failed ScrapeResult."""

        class FailingScraper(DummyScraper):
            def fetch(self, url):
                raise ConnectionError("network down")

        with self.assertLogs("product_scraper.base", level="ERROR"):
            result = FailingScraper().run("https://example.com")
        self.assertFalse(result.success)
        self.assertEqual(result.error_type, "ConnectionError")
        self.assertEqual(result.products, ())

    def test_scrape_returns_products(self):
        self.assertEqual(len(DummyScraper().scrape("https://example.com")), 1)


if __name__ == "__main__":
    unittest.main()
