from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import (
    LINK_PLACEHOLDER,
    METHOD_LINK_EXTRACTION,
    METHOD_STRUCTURED,
    PRICE_UNAVAILABLE,
    TITLE_UNKNOWN,
    ProductRecord,
)
from .urls import origin_of, resolve_url

logger = logging.getLogger(__name__)

# Common product listing idioms, highest priority first.
CONTAINER_SELECTORS = (
    ".product",
    ".product-item",
    ".shop-item",
    ".product-card",
    ".woocommerce-product",
    "[data-product]",
    ".product-list-item",
    ".item",
    ".listing",
    ".card",
)

TITLE_SELECTORS = (
    ".product-title",
    ".title",
    ".name",
    "h1",
    "h2",
    "h3",
    "h4",
    ".product-name",
    "[data-title]",
)

PRICE_SELECTORS = (".price", ".cost", ".amount", ".product-price", "[data-price]")

DESCRIPTION_SELECTORS = (".description", ".product-description", ".excerpt", "p")

PRODUCT_LINK_MARKERS = ("product", "shop", "buy", "item")

PRICE_PATTERN = re.compile(r"\$\d+|\d+\.\d{2}|USD|EUR|GBP", re.IGNORECASE)

MAX_TITLE_TEXT = 200
MAX_DESCRIPTION = 500
TRUNCATION_MARKER = "..."


def parse_markup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def first_text(element: Tag, selectors: Iterable[str]) -> Optional[str]:
    """Trimmed text of the first descendant matching the first usable selector."""
    for selector in selectors:
        node = element.select_one(selector)
        if node is None:
            continue
        text = node.get_text().strip()
        if text:
            return text
    return None


def truncate_description(text: str) -> str:
    if len(text) > MAX_DESCRIPTION:
        return text[:MAX_DESCRIPTION] + TRUNCATION_MARKER
    return text


class StructuredExtractor:
    """Pulls product records out of repeated container elements.

    Container selectors are tried in priority order and only the first one
    that yields a titled record contributes; lower-priority selectors are
    never merged in."""

    def __init__(self, base_url: str, container_selectors: Iterable[str] = CONTAINER_SELECTORS) -> None:
        self._base_url = origin_of(base_url)
        self._container_selectors = tuple(container_selectors)

    def for_page(self, url: str) -> "StructuredExtractor":
        """Same selectors, links resolved against the origin of url."""
        return StructuredExtractor(url, self._container_selectors)

    def extract(self, markup: str) -> tuple[ProductRecord, ...]:
        return self.extract_from(parse_markup(markup))

    def extract_from(self, soup: BeautifulSoup) -> tuple[ProductRecord, ...]:
        for selector in self._container_selectors:
            elements = soup.select(selector)
            if not elements:
                continue
            logger.info("Found %d products using selector: %s", len(elements), selector)
            records = tuple(
                record
                for record in (self.extract_record(el, index) for index, el in enumerate(elements))
                if record.title != TITLE_UNKNOWN
            )
            if records:
                return records
        return ()

    def extract_record(self, element: Tag, index: int) -> ProductRecord:
        return ProductRecord(
            title=self._title(element),
            price=first_text(element, PRICE_SELECTORS) or PRICE_UNAVAILABLE,
            link=self._link(element),
            description=truncate_description(first_text(element, DESCRIPTION_SELECTORS) or ""),
            method=METHOD_STRUCTURED,
            extraction_index=index,
        )

    def _title(self, element: Tag) -> str:
        title = first_text(element, TITLE_SELECTORS)
        if title:
            return title
        # Short containers are often just the product name.
        own_text = element.get_text().strip()
        if own_text and len(own_text) < MAX_TITLE_TEXT:
            return own_text.split("\n")[0].strip() or TITLE_UNKNOWN
        return TITLE_UNKNOWN

    def _link(self, element: Tag) -> str:
        anchor = element.find("a")
        if anchor is not None:
            return resolve_url(anchor.get("href"), self._base_url)
        if element.name == "a":
            return resolve_url(element.get("href"), self._base_url)
        return LINK_PLACEHOLDER


class FallbackExtractor:
    """Last resort when no container selector produced anything.

    Harvests product-looking links, then counts price-like text nodes. The
    price count is only logged, it never turns into records."""

    def __init__(self, base_url: str, link_markers: Iterable[str] = PRODUCT_LINK_MARKERS) -> None:
        self._base_url = origin_of(base_url)
        self._link_markers = tuple(link_markers)

    def for_page(self, url: str) -> "FallbackExtractor":
        return FallbackExtractor(url, self._link_markers)

    def extract(self, markup: str) -> tuple[ProductRecord, ...]:
        return self.extract_from(parse_markup(markup))

    def extract_from(self, soup: BeautifulSoup) -> tuple[ProductRecord, ...]:
        records = self.harvest_links(soup)
        self.count_price_elements(soup)
        return records

    def link_selector(self) -> str:
        return ", ".join(f'a[href*="{marker}"]' for marker in self._link_markers)

    def harvest_links(self, soup: BeautifulSoup) -> tuple[ProductRecord, ...]:
        links = soup.select(self.link_selector())
        if not links:
            return ()
        logger.info("Found %d potential product links", len(links))
        records = []
        for link in links:
            href = link.get("href")
            text = link.get_text().strip()
            if text and href and len(text) > 3:
                records.append(
                    ProductRecord(
                        title=text,
                        price=PRICE_UNAVAILABLE,
                        link=resolve_url(href, self._base_url),
                        description="",
                        method=METHOD_LINK_EXTRACTION,
                    )
                )
        return tuple(records)

    def count_price_elements(self, soup: BeautifulSoup) -> int:
        count = sum(1 for el in soup.find_all(True) if PRICE_PATTERN.search(el.get_text()))
        if count:
            logger.info("Found %d elements with price-like content", count)
        return count
