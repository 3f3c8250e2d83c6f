from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://theplrdrop.me"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass(frozen=True)
class ScraperConfig:
    """Tunables shared by every fetch strategy and the extractors.

    Timeouts are in seconds; the browser strategy converts to milliseconds
    when talking to Playwright.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    plain_timeout: float = 15.0
    enhanced_timeout: float = 20.0
    enhanced_max_redirects: int = 5
    impersonate: str = "chrome120"
    browser_timeout: float = 30.0
    include_browser: bool = True
