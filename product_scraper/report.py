from __future__ import annotations

from typing import List, Sequence

from .models import ProductRecord

FAILURE_CAUSES = (
    "The website structure has changed",
    "The site requires JavaScript to load products",
    "Network connectivity issues",
    "The site has anti-scraping measures",
)


def format_summary(products: Sequence[ProductRecord]) -> str:
    """Human-readable listing of the extracted records."""
    lines: List[str] = ["Extraction Summary:", f"Total products found: {len(products)}"]
    if not products:
        return "\n".join(lines)

    lines.extend(["", "Product List:"])
    for number, product in enumerate(products, start=1):
        lines.append(f"{number}. {product.title}")
        lines.append(f"   Price: {product.price}")
        lines.append(f"   Link: {product.link}")
        if product.description:
            lines.append(f"   Description: {product.description[:100]}...")
        lines.append("")
    return "\n".join(lines)


def failure_guidance() -> str:
    """What to tell the operator when a scrape came back empty."""
    lines = ["No products found.", "This could be due to:"]
    lines.extend(f"- {cause}" for cause in FAILURE_CAUSES)
    return "\n".join(lines)
