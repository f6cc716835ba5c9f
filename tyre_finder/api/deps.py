"""FastAPI dependency injection."""

import threading
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client, create_client

from ..core.config import Settings, get_settings
from ..core.logging import logger
from ..services.catalog import CatalogConfig, RemoteCatalogClient
from ..services.enrichment import TyreEnrichmentService
from ..services.inventory import (
    InventoryMatcher,
    NullProductSearch,
    ProductSearch,
    SupabaseProductSearch,
)
from ..services.selection import SelectionController

_catalog_client: RemoteCatalogClient | None = None
_catalog_lock = threading.Lock()


def get_catalog_client() -> RemoteCatalogClient:
    """Shared catalog client, created on first use."""
    global _catalog_client
    if _catalog_client is None:
        with _catalog_lock:
            if _catalog_client is None:
                _catalog_client = RemoteCatalogClient(CatalogConfig.from_settings())
    return _catalog_client


def close_catalog_client() -> None:
    global _catalog_client
    with _catalog_lock:
        if _catalog_client is not None:
            _catalog_client.close()
            _catalog_client = None


@lru_cache
def get_supabase_client(url: str, key: str) -> Client:
    """Get cached Supabase client."""
    return create_client(url, key)


def get_product_search(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProductSearch:
    if not (settings.supabase_url and settings.supabase_key):
        logger.debug("Supabase not configured - every tyre reported unavailable")
        return NullProductSearch()
    client = get_supabase_client(settings.supabase_url, settings.supabase_key)
    return SupabaseProductSearch(client, settings.products_table)


def get_selection_controller(
    catalog: Annotated[RemoteCatalogClient, Depends(get_catalog_client)],
) -> SelectionController:
    return SelectionController(catalog)


def get_enrichment_service(
    catalog: Annotated[RemoteCatalogClient, Depends(get_catalog_client)],
    products: Annotated[ProductSearch, Depends(get_product_search)],
) -> TyreEnrichmentService:
    return TyreEnrichmentService(catalog, InventoryMatcher(products))
