"""Tests for href resolution."""

import unittest

from product_scraper.models import LINK_PLACEHOLDER
from product_scraper.urls import origin_of, resolve_url

BASE = "https://b"


class TestResolveUrl(unittest.TestCase):
    """Verify each resolution rule in order."""

    def test_absolute_url_unchanged(self):
        self.assertEqual(resolve_url("http://x/y", BASE), "http://x/y")

    def test_https_url_unchanged(self):
        self.assertEqual(resolve_url("https://x/y?q=1#frag", BASE), "https://x/y?q=1#frag")

    def test_protocol_relative_gets_https(self):
        self.assertEqual(resolve_url("//x/y", BASE), "https://x/y")

    def test_root_relative_joins_base(self):
        self.assertEqual(resolve_url("/y", BASE), "https://b/y")

    def test_relative_joins_base_with_slash(self):
        self.assertEqual(resolve_url("y", BASE), "https://b/y")

    def test_dot_segments_not_normalized(self):
        """Paths are concatenated as-is."""
        self.assertEqual(resolve_url("../y", BASE), "https://b/../y")

    def test_missing_href_returns_placeholder(self):
        self.assertEqual(resolve_url(None, BASE), LINK_PLACEHOLDER)
        self.assertEqual(resolve_url("", BASE), LINK_PLACEHOLDER)


class TestOriginOf(unittest.TestCase):
    """Verify that page URLs reduce to scheme and host."""

    def test_strips_path_query_and_fragment(self):
        self.assertEqual(origin_of("https://shop.test/collections/all?page=2#top"), "https://shop.test")

    def test_keeps_port(self):
        self.assertEqual(origin_of("http://localhost:8000/shop/"), "http://localhost:8000")

    def test_origin_unchanged(self):
        self.assertEqual(origin_of("https://b"), "https://b")


if __name__ == "__main__":
    unittest.main()
