from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

TITLE_UNKNOWN = "N/A"
PRICE_UNAVAILABLE = "Price not available"
LINK_PLACEHOLDER = "#"

METHOD_STRUCTURED = "structured"
METHOD_LINK_EXTRACTION = "link-extraction"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ProductRecord:
    title: str
    price: str = PRICE_UNAVAILABLE
    link: str = LINK_PLACEHOLDER
    description: str = ""
    method: str = METHOD_STRUCTURED
    extraction_index: Optional[int] = None
    extracted_at: str = field(default_factory=_utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "price": self.price,
            "link": self.link,
            "description": self.description,
            "extractedAt": self.extracted_at,
            "method": self.method,
            "extractionIndex": self.extraction_index,
        }


@dataclass(frozen=True)
class FetchedPage:
    strategy: str
    markup: str
    url: str = ""


@dataclass(frozen=True)
class ScrapeResult:
    url: str
    success: bool
    strategy: Optional[str]
    latency_ms: int
    products: Tuple[ProductRecord, ...]
    error_type: Optional[str]
