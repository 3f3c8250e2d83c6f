from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import requests
from bs4.dammit import EncodingDetector
from curl_cffi import requests as curl_requests

from .models import FetchedPage

try:
    from playwright.sync_api import sync_playwright
except ImportError:
    sync_playwright = None

logger = logging.getLogger(__name__)


class NoContentError(RuntimeError):
    """Raised when every fetch strategy came back empty."""


def decoded_text(resp: requests.Response) -> str:
    """Body text, honouring a <meta> charset when the header names none.

    requests falls back to ISO-8859-1 for text/html without a charset.
    """
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        declared = EncodingDetector.find_declared_encoding(resp.content, is_html=True)
        resp.encoding = declared or resp.apparent_encoding
    return resp.text


class FetchStrategy(ABC):
    """One way of retrieving page markup.

    attempt_fetch() never raises for network trouble: it logs and returns
    None so the chain can move on to the next strategy."""

    name = "strategy"

    @abstractmethod
    def attempt_fetch(self, url: str) -> Optional[str]:
        raise NotImplementedError


class PlainRequestFetcher(FetchStrategy):
    """Single GET with the headers a desktop browser would send."""

    name = "plain-request"

    def __init__(self, user_agent: str, timeout: float = 15.0) -> None:
        self._user_agent = user_agent
        self._timeout = timeout

    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Accept-Encoding": "gzip, deflate",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
        }

    def attempt_fetch(self, url: str) -> Optional[str]:
        try:
            resp = requests.get(url, headers=self.headers(), timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Failed to fetch %s: %s", url, exc)
            return None
        return decoded_text(resp) or None


class EnhancedHeaderFetcher(FetchStrategy):
    """GET through an impersonating client with referrer and no-cache headers."""

    name = "enhanced-headers"

    def __init__(
        self,
        user_agent: str,
        timeout: float = 20.0,
        max_redirects: int = 5,
        impersonate: str = "chrome120",
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_redirects = max_redirects
        self._impersonate = impersonate

    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Referer": "https://google.com",
            "Accept": "*/*",
            "Cache-Control": "no-cache",
        }

    def attempt_fetch(self, url: str) -> Optional[str]:
        session = curl_requests.Session()
        try:
            resp = session.get(
                url,
                headers=self.headers(),
                timeout=self._timeout,
                allow_redirects=True,
                max_redirects=self._max_redirects,
                impersonate=self._impersonate,
            )
            resp.raise_for_status()
            return resp.text or None
        except Exception as exc:  # noqa: BLE001
            logger.warning("Enhanced headers fetch failed: %s", exc)
            return None
        finally:
            session.close()


class BrowserFetcher(FetchStrategy):
    """Renders the page in headless Chromium and returns the final DOM.

    The browser is launched per attempt and always closed before returning,
    whether navigation succeeded, timed out or failed."""

    name = "browser"

    LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")

    def __init__(self, user_agent: str, timeout: float = 30.0) -> None:
        self._user_agent = user_agent
        self._timeout_ms = int(timeout * 1000)

    def attempt_fetch(self, url: str) -> Optional[str]:
        if sync_playwright is None:
            logger.info("Playwright not available, skipping browser-based extraction")
            return None
        try:
            with sync_playwright() as pw:
                browser = pw.chromium.launch(headless=True, args=list(self.LAUNCH_ARGS))
                try:
                    page = browser.new_page(user_agent=self._user_agent)
                    page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
                    return page.content() or None
                finally:
                    browser.close()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Browser fetch failed: %s", exc)
            return None


class FetchChain:
    """Runs strategies in order until one yields markup."""

    def __init__(self, strategies: Sequence[FetchStrategy]) -> None:
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[FetchStrategy, ...]:
        return self._strategies

    def fetch_page(self, url: str) -> FetchedPage:
        for strategy in self._strategies:
            markup = strategy.attempt_fetch(url)
            if markup:
                logger.info("Page content retrieved via %s", strategy.name)
                return FetchedPage(strategy=strategy.name, markup=markup, url=url)
            logger.info("%s returned no content, trying next strategy", strategy.name)
        raise NoContentError("Unable to fetch page content")

    def fetch_content(self, url: str) -> str:
        return self.fetch_page(url).markup
