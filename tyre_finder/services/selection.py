"""Stage queries of the brand → model → year → modification cascade.

Each operation is one catalog call projected onto typed records. A failed
fetch and an empty list both come back as ``[]``; the operations never call
each other, so sequencing is left to the caller.
"""

from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.logging import logger
from ..models.vehicle import (
    Brand,
    CatalogId,
    ModelYear,
    Modification,
    TyreCandidate,
    VehicleModel,
)
from .catalog import FetchFailure, RemoteCatalogClient

R = TypeVar("R", bound=BaseModel)


def _text(row: dict[str, Any], key: str) -> str:
    # Names may arrive as numbers (years); missing or null is malformed.
    value = row[key]
    if value is None:
        raise KeyError(key)
    return str(value)


def _project(
    rows: list[Any] | FetchFailure,
    stage: str,
    build: Callable[[dict[str, Any]], R],
) -> list[R]:
    if isinstance(rows, FetchFailure):
        return []

    records: list[R] = []
    for row in rows:
        if not isinstance(row, dict):
            logger.warning(f"Skipping non-object {stage} row: {row!r}")
            continue
        try:
            records.append(build(row))
        except (KeyError, ValidationError) as e:
            logger.warning(f"Skipping malformed {stage} row {row!r}: {e}")
    return records


class SelectionController:
    def __init__(self, catalog: RemoteCatalogClient) -> None:
        self.catalog = catalog

    def list_brands(self) -> list[Brand]:
        return _project(
            self.catalog.brands(),
            "brand",
            lambda row: Brand(
                id=row["id"], display_name=_text(row, "name"), logo_url=row.get("logo")
            ),
        )

    def list_models(self, brand_id: CatalogId) -> list[VehicleModel]:
        return _project(
            self.catalog.models(brand_id),
            "model",
            lambda row: VehicleModel(
                id=row["id"], display_name=_text(row, "name"), parent_brand_id=brand_id
            ),
        )

    def list_years(self, model_id: CatalogId) -> list[ModelYear]:
        return _project(
            self.catalog.years(model_id),
            "year",
            lambda row: ModelYear(
                id=row["id"], display_name=_text(row, "name"), parent_model_id=model_id
            ),
        )

    def list_modifications(self, year_id: CatalogId) -> list[Modification]:
        return _project(
            self.catalog.modifications(year_id),
            "modification",
            lambda row: Modification(
                id=row["id"], display_name=_text(row, "name"), parent_year_id=year_id
            ),
        )

    def list_tyre_candidates(self, modification_id: CatalogId) -> list[TyreCandidate]:
        return _project(
            self.catalog.tyres(modification_id),
            "tyre",
            lambda row: TyreCandidate(id=row["id"], short_label=_text(row, "tyre")),
        )
