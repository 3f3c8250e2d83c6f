from __future__ import annotations

import argparse
import logging
from typing import Optional

from product_scraper.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ScraperConfig
from product_scraper.factory import ScraperFactory
from product_scraper.report import failure_guidance, format_summary
from product_scraper.storage import JsonStorage


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_scrape(config: ScraperConfig, output_path: Optional[str]) -> int:
    scraper = ScraperFactory(config).create_scraper()
    result = scraper.run(config.base_url)

    print(
        f"url={result.url} success={result.success} strategy={result.strategy} "
        f"latency_ms={result.latency_ms} error={result.error_type}"
    )

    if not result.products:
        print()
        print(failure_guidance())
        return 1

    saved = JsonStorage(output_path).save(result.products, source=config.base_url)
    print()
    print(format_summary(result.products))
    if saved:
        print(f"Check {saved} for full product data.")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract product listings from a single web page")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help="Page to scrape; relative links resolve against its origin")
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent sent by every fetch strategy")
    parser.add_argument("--output", default=None, help="JSON output path (default: <host>-products-<date>.json)")
    parser.add_argument("--no-browser", action="store_true", help="Skip the headless browser strategy")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    _configure_logging(args.verbose)

    config = ScraperConfig(
        base_url=args.url,
        user_agent=args.user_agent,
        include_browser=not args.no_browser,
    )
    raise SystemExit(run_scrape(config, args.output))


if __name__ == "__main__":
    main()
