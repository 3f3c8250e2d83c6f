from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, Sequence
from urllib.parse import urlsplit

from .models import ProductRecord

logger = logging.getLogger(__name__)


def default_filename(source: str, now: Optional[datetime] = None) -> str:
    """e.g. ``theplrdrop.me-products-2024-05-01.json``."""
    now = now or datetime.now(timezone.utc)
    host = urlsplit(source).netloc or "products"
    return f"{host}-products-{now.date().isoformat()}.json"


class StorageBase(ABC):
    """Abstract base class for all storage backends."""

    @abstractmethod
    def save(self, products: Sequence[ProductRecord], source: str) -> Optional[str]:
        """Persist one scrape's records; return where they went, or None on failure."""


class JsonStorage(StorageBase):
    """Writes a single JSON document per scrape.

    A failed write is logged and reported as None; the records passed in are
    never modified."""

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = path

    def save(self, products: Sequence[ProductRecord], source: str) -> Optional[str]:
        path = self._path or default_filename(source)
        document = {
            "extractedAt": datetime.now(timezone.utc).isoformat(),
            "source": source,
            "totalProducts": len(products),
            "products": [p.to_dict() for p in products],
        }
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
        except OSError as exc:
            logger.error("Error saving products to %s: %s", path, exc)
            return None
        logger.info("Products saved to %s", path)
        return path
