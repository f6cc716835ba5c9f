"""Join catalog tyre specs for a modification with store availability."""

from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from ..core.logging import logger
from ..models.result import Err, Ok, Result
from ..models.tyre import (
    NOT_AVAILABLE,
    DataResponsePayload,
    EnrichedTyreResult,
    FrontWheelPayload,
    InventoryMatch,
    TyreDetailEntry,
    TyreSpec,
)
from ..models.vehicle import CatalogId
from .catalog import FetchFailure, RemoteCatalogClient
from .inventory import InventoryMatcher, extract_core_size

_ENTRIES = TypeAdapter(list[TyreDetailEntry])


def _or_na(value: Optional[Any]) -> Any:
    return NOT_AVAILABLE if value is None else value


def build_tyre_spec(front: FrontWheelPayload, data: DataResponsePayload) -> TyreSpec:
    """Flatten one wheel entry and its sibling technical/generation data."""
    technical = data.technical
    fasteners = technical.wheel_fasteners if technical else None
    return TyreSpec(
        tire_full=_or_na(None if front.tire_full is None else str(front.tire_full)),
        tire_weight_kg=_or_na(front.tire_weight_kg),
        tire_diameter_mm=_or_na(front.tire_diameter_mm),
        rim=_or_na(front.rim),
        bolt_pattern=_or_na(technical.bolt_pattern if technical else None),
        wheel_fasteners_type=_or_na(fasteners.type if fasteners else None),
        wheel_fasteners_thread_size=_or_na(fasteners.thread_size if fasteners else None),
        wheel_tightening_torque=_or_na(
            technical.wheel_tightening_torque if technical else None
        ),
        tire_pressure=_or_na(front.tire_pressure),
        image=_or_na(data.image),
    )


class TyreEnrichmentService:
    """Builds the display list of tyres for one vehicle modification.

    The ``/tyres/{id}`` payload already carries every wheel entry of the
    modification, so it is fetched once and fanned out in memory.
    """

    def __init__(self, catalog: RemoteCatalogClient, matcher: InventoryMatcher) -> None:
        self.catalog = catalog
        self.matcher = matcher

    def enrich(self, modification_id: CatalogId) -> Result[list[EnrichedTyreResult]]:
        rows = self.catalog.tyres(modification_id)
        if isinstance(rows, FetchFailure):
            return Err(rows.message)

        try:
            entries = _ENTRIES.validate_python(rows)
        except ValidationError as e:
            logger.error(
                f"Malformed tyre payload for modification {modification_id}: "
                f"{e.error_count()} errors"
            )
            return Err(f"Malformed tyre payload for modification {modification_id}")

        results: list[EnrichedTyreResult] = []
        for entry in entries:
            for data in entry.data_response:
                for wheel in data.wheels:
                    spec = build_tyre_spec(wheel.front, data)
                    core_size = extract_core_size(spec.tire_full)
                    match = (
                        self.matcher.match_core_size(core_size)
                        if core_size
                        else InventoryMatch.unavailable()
                    )
                    results.append(EnrichedTyreResult.merge(spec, match, core_size))

        logger.info(
            f"Enriched {len(results)} tyres for modification {modification_id} "
            f"({sum(r.available for r in results)} in stock)"
        )
        return Ok(results)
