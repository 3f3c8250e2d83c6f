from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

from .models import LINK_PLACEHOLDER

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def origin_of(url: str) -> str:
    """Scheme and host of url, e.g. ``https://shop.test`` for any page on it."""
    return urlsplit(url)._replace(path="", query="", fragment="").geturl()


def resolve_url(href: Optional[str], base_url: str) -> str:
    """Turn an href found in the page into an absolute URL.

    Only prefixing is done; ``..`` segments, queries and fragments are kept
    as they appear in the markup.
    """
    if not href:
        return LINK_PLACEHOLDER
    if _SCHEME_RE.match(href):
        return href
    if href.startswith("//"):
        return "https:" + href
    if href.startswith("/"):
        return base_url + href
    return base_url + "/" + href
