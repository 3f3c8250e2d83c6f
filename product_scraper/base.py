from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional
from urllib.parse import urlsplit

from .models import ProductRecord, ScrapeResult

logger = logging.getLogger(__name__)


class BaseScraper(ABC):
    """Abstract base class defining the validate -> fetch -> parse pipeline.

    - run() never raises; failures come back as a ScrapeResult with no
      products and error_type set to the exception class name.
    - Nothing is kept on the instance between runs, so one scraper can be
      reused for several pages.
    """

    def run(self, url: str) -> ScrapeResult:
        start_ms = self._now_ms()
        strategy: Optional[str] = None

        try:
            self.validate(url)
            page = self.fetch(url)
            strategy = getattr(page, "strategy", None)
            products = tuple(self.parse(page))
        except Exception as exc:  # noqa: BLE001
            logger.error("Error scraping products from %s: %s", url, exc)
            return ScrapeResult(
                url=url,
                success=False,
                strategy=strategy,
                latency_ms=self._now_ms() - start_ms,
                products=(),
                error_type=type(exc).__name__,
            )

        return ScrapeResult(
            url=url,
            success=True,
            strategy=strategy,
            latency_ms=self._now_ms() - start_ms,
            products=products,
            error_type=None,
        )

    def scrape(self, url: str) -> tuple[ProductRecord, ...]:
        """Records extracted from url, or an empty tuple if scraping failed."""
        return self.run(url).products

    def validate(self, url: str) -> None:
        if not url:
            raise ValueError("url is required")
        if urlsplit(url).scheme not in ("http", "https"):
            raise ValueError(f"url must be http or https: {url}")

    @abstractmethod
    def fetch(self, url: str) -> Any:
        ...

    @abstractmethod
    def parse(self, page: Any) -> tuple[ProductRecord, ...]:
        ...

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)
