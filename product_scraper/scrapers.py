from __future__ import annotations

import logging

from .base import BaseScraper
from .extractors import FallbackExtractor, StructuredExtractor, parse_markup
from .fetchers import FetchChain
from .models import FetchedPage, ProductRecord

logger = logging.getLogger(__name__)


class ProductScraper(BaseScraper):
    def __init__(
        self,
        chain: FetchChain,
        structured: StructuredExtractor,
        fallback: FallbackExtractor,
    ) -> None:
        self._chain = chain
        self._structured = structured
        self._fallback = fallback

    def fetch(self, url: str) -> FetchedPage:
        return self._chain.fetch_page(url)

    def parse(self, page: FetchedPage) -> tuple[ProductRecord, ...]:
        logger.info("Parsing products from %s markup", page.strategy)
        structured, fallback = self._structured, self._fallback
        if page.url:
            structured, fallback = structured.for_page(page.url), fallback.for_page(page.url)
        soup = parse_markup(page.markup)
        records = structured.extract_from(soup)
        if records:
            return records
        logger.info("No products found with primary selectors, trying alternative methods")
        return fallback.extract_from(soup)
