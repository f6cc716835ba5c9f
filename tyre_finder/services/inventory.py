"""Store inventory lookup for catalog tyre sizes.

A catalog descriptor such as ``"205/55R16 91V"`` is reduced to its core size
token (``"205/55R16"``) and the product store is searched for that token.
The first published match is the one shown to the visitor.
"""

import re
import time
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..core.logging import log_db_query, logger
from ..models.tyre import NOT_AVAILABLE, InventoryMatch

CORE_SIZE_RE = re.compile(r"^(\d+/\d+R\d+)")


def extract_core_size(tire_full: Optional[str]) -> Optional[str]:
    """Return the ``width/aspectRrim`` prefix of a tyre descriptor.

    >>> extract_core_size("205/55R16 91V")
    '205/55R16'
    >>> extract_core_size("N/A") is None
    True
    """
    if not tire_full or tire_full == NOT_AVAILABLE:
        return None
    match = CORE_SIZE_RE.match(tire_full)
    return match.group(1) if match else None


@dataclass(frozen=True)
class ProductRecord:
    id: Any
    permalink: str


class ProductSearch(Protocol):
    def search(self, term: str, limit: int = 1) -> list[ProductRecord]: ...


class SupabaseProductSearch:
    """Free-text search over published products in a Supabase table."""

    def __init__(self, client: Client, table: str = "products") -> None:
        self.client = client
        self.table = table

    def search(self, term: str, limit: int = 1) -> list[ProductRecord]:
        start = time.time()
        query = (
            self.client.table(self.table)
            .select("id, permalink")
            .eq("status", "publish")
            .ilike("name", f"%{term}%")
            .order("id")
            .limit(limit)
        )
        try:
            result = query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Product search failed for {term!r}: {e}")
            return []
        log_db_query("search", self.table, (time.time() - start) * 1000)

        products: list[ProductRecord] = []
        if result.data and isinstance(result.data, list):
            for row in result.data:
                if isinstance(row, dict) and row.get("id") is not None:
                    products.append(
                        ProductRecord(
                            id=row["id"],
                            permalink=str(row["permalink"]) if row.get("permalink") else "#",
                        )
                    )
        return products


class NullProductSearch:
    """Used when no product store is configured: nothing is ever in stock."""

    def search(self, term: str, limit: int = 1) -> list[ProductRecord]:
        return []


class InventoryMatcher:
    def __init__(self, products: ProductSearch) -> None:
        self.products = products

    def find_available(self, tire_full: Optional[str]) -> InventoryMatch:
        """Look up store availability for a full tyre descriptor.

        Descriptors without a parseable core size are unavailable and the
        product store is not queried.
        """
        core_size = extract_core_size(tire_full)
        if core_size is None:
            return InventoryMatch.unavailable()
        return self.match_core_size(core_size)

    def match_core_size(self, core_size: str) -> InventoryMatch:
        hits = self.products.search(core_size, limit=1)
        if not hits:
            return InventoryMatch.unavailable()
        product = hits[0]
        return InventoryMatch(
            product_id=product.id, permalink=product.permalink, available=True
        )
