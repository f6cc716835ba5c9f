from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

# Catalog ids arrive as JSON numbers or strings and are passed through as-is.
CatalogId = Union[int, str]


class CatalogRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: CatalogId
    display_name: str


class Brand(CatalogRecord):
    logo_url: Optional[str] = None


class VehicleModel(CatalogRecord):
    parent_brand_id: CatalogId


class ModelYear(CatalogRecord):
    parent_model_id: CatalogId


class Modification(CatalogRecord):
    parent_year_id: CatalogId


class TyreCandidate(BaseModel):
    """Minimal tyre record from the listing stage (``{id, tyre}`` on the wire)."""

    model_config = ConfigDict(frozen=True)

    id: CatalogId
    short_label: str
