"""Product page scraper package.

Fetches one page through a cascade of retrieval strategies and extracts
product-like records with generic CSS selector heuristics.

Key modules:
    fetchers    -- FetchStrategy implementations and the FetchChain cascade
    extractors  -- StructuredExtractor and FallbackExtractor
    urls        -- resolve_url for hrefs found in the page
    base        -- BaseScraper validate/fetch/parse pipeline
    scrapers    -- ProductScraper, the concrete pipeline
    factory     -- ScraperFactory wiring strategies and extractors from config
    config      -- ScraperConfig dataclass
    models      -- ProductRecord, FetchedPage, ScrapeResult dataclasses
    storage     -- StorageBase and JsonStorage for persistence
    report      -- summary and failure guidance text
"""
