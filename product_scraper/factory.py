from __future__ import annotations

from .config import ScraperConfig
from .extractors import FallbackExtractor, StructuredExtractor
from .fetchers import (
    BrowserFetcher,
    EnhancedHeaderFetcher,
    FetchChain,
    FetchStrategy,
    PlainRequestFetcher,
)
from .scrapers import ProductScraper


class ScraperFactory:
    """Builds the fetch chain and scraper for a configuration.

    Every call returns fresh objects; nothing is cached, so concurrent scrapes
    never share a browser or extractor instance.
    """

    def __init__(self, config: ScraperConfig) -> None:
        self._config = config

    def create_strategies(self) -> list[FetchStrategy]:
        cfg = self._config
        strategies: list[FetchStrategy] = [
            PlainRequestFetcher(user_agent=cfg.user_agent, timeout=cfg.plain_timeout),
            EnhancedHeaderFetcher(
                user_agent=cfg.user_agent,
                timeout=cfg.enhanced_timeout,
                max_redirects=cfg.enhanced_max_redirects,
                impersonate=cfg.impersonate,
            ),
        ]
        if cfg.include_browser:
            strategies.append(BrowserFetcher(user_agent=cfg.user_agent, timeout=cfg.browser_timeout))
        return strategies

    def create_chain(self) -> FetchChain:
        return FetchChain(self.create_strategies())

    def create_scraper(self) -> ProductScraper:
        return ProductScraper(
            chain=self.create_chain(),
            structured=StructuredExtractor(base_url=self._config.base_url),
            fallback=FallbackExtractor(base_url=self._config.base_url),
        )
