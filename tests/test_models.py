"""Tests for data model classes."""

import unittest

from product_scraper.models import (
    LINK_PLACEHOLDER,
    METHOD_LINK_EXTRACTION,
    PRICE_UNAVAILABLE,
    FetchedPage,
    ProductRecord,
    ScrapeResult,
)


class TestProductRecord(unittest.TestCase):
    """Verify ProductRecord defaults, immutability and serialization."""

    def test_create_record_with_defaults(self):
        """Only a title is required; other fields fall back to sentinels."""
        record = ProductRecord(title="Widget")
        self.assertEqual(record.price, PRICE_UNAVAILABLE)
        self.assertEqual(record.link, LINK_PLACEHOLDER)
        self.assertEqual(record.description, "")
        self.assertIsNone(record.extraction_index)
        self.assertTrue(record.extracted_at)

    def test_record_is_immutable(self):
        """Frozen dataclass should raise on attribute assignment."""
        record = ProductRecord(title="Widget")
        with self.assertRaises(AttributeError):
            record.title = "Other"

    def test_to_dict_uses_document_keys(self):
        """to_dict() should expose the keys written to the JSON document."""
        record = ProductRecord(
            title="Widget",
            link="https://example.com/shop/widget",
            method=METHOD_LINK_EXTRACTION,
            extracted_at="2024-01-01T00:00:00+00:00",
        )
        data = record.to_dict()
        self.assertEqual(data["extractedAt"], "2024-01-01T00:00:00+00:00")
        self.assertEqual(data["method"], "link-extraction")
        self.assertIsNone(data["extractionIndex"])
        self.assertEqual(data["link"], "https://example.com/shop/widget")


class TestScrapeResult(unittest.TestCase):
    """Verify ScrapeResult and FetchedPage creation."""

    def test_failed_result(self):
        """A failed result should carry the error_type and no products."""
        result = ScrapeResult(
            url="https://example.com",
            success=False,
            strategy=None,
            latency_ms=10,
            products=(),
            error_type="NoContentError",
        )
        self.assertFalse(result.success)
        self.assertEqual(result.products, ())

    def test_fetched_page(self):
        page = FetchedPage(strategy="browser", markup="<html></html>")
        self.assertEqual(page.strategy, "browser")


if __name__ == "__main__":
    unittest.main()
