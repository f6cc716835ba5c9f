"""FastAPI route definitions for the tyre finder API."""

import asyncio
import json
from typing import Annotated, Literal, Sequence

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from ..core.config import Settings, get_settings
from ..core.logging import logger
from ..models.vehicle import (
    Brand,
    CatalogRecord,
    ModelYear,
    Modification,
    TyreCandidate,
    VehicleModel,
)
from ..services.enrichment import TyreEnrichmentService
from ..services.selection import SelectionController
from .deps import get_enrichment_service, get_selection_controller
from .presenter import (
    EMPTY_OPTION_LABELS,
    TyreLookupResponse,
    present_tyres,
    render_options,
)

router = APIRouter()
rest_router = APIRouter(prefix="/tyres/v1")

Controller = Annotated[SelectionController, Depends(get_selection_controller)]
Enrichment = Annotated[TyreEnrichmentService, Depends(get_enrichment_service)]
AppSettings = Annotated[Settings, Depends(get_settings)]
ResponseFormat = Annotated[Literal["json", "html"], Query(alias="format")]
StageId = Annotated[str, Query(min_length=1)]


def _stage_response(
    records: Sequence[CatalogRecord], stage: str, fmt: str
) -> Sequence[CatalogRecord] | HTMLResponse:
    if fmt == "html":
        return HTMLResponse(render_options(records, EMPTY_OPTION_LABELS[stage]))
    return records


# ---------------------------------------------------------------------------
# Cascade stages
# ---------------------------------------------------------------------------


@router.get("/brands", response_model=None)
def list_brands(
    controller: Controller, fmt: ResponseFormat = "json"
) -> list[Brand] | HTMLResponse:
    return _stage_response(controller.list_brands(), "brand", fmt)


@router.get("/models", response_model=None)
def list_models(
    controller: Controller, brand: StageId, fmt: ResponseFormat = "json"
) -> list[VehicleModel] | HTMLResponse:
    return _stage_response(controller.list_models(brand), "model", fmt)


@router.get("/years", response_model=None)
def list_years(
    controller: Controller, id: StageId, fmt: ResponseFormat = "json"
) -> list[ModelYear] | HTMLResponse:
    return _stage_response(controller.list_years(id), "year", fmt)


@router.get("/modifications", response_model=None)
def list_modifications(
    controller: Controller, id: StageId, fmt: ResponseFormat = "json"
) -> list[Modification] | HTMLResponse:
    return _stage_response(controller.list_modifications(id), "modification", fmt)


@router.get("/tyre-candidates", response_model=list[TyreCandidate])
def list_tyre_candidates(controller: Controller, id: StageId) -> list[TyreCandidate]:
    return controller.list_tyre_candidates(id)


# ---------------------------------------------------------------------------
# Tyre lookup
# ---------------------------------------------------------------------------


@router.get("/tyres", response_model=TyreLookupResponse)
def lookup_tyres(
    service: Enrichment, settings: AppSettings, id: StageId
) -> TyreLookupResponse:
    """Enriched tyres for a modification, with a storefront search link."""
    return present_tyres(service.enrich(id), settings.site_base_url)


@rest_router.post("/get", response_model=TyreLookupResponse)
async def get_tyres(
    request: Request, service: Enrichment, settings: AppSettings
) -> TyreLookupResponse:
    """REST variant of the tyre lookup taking ``{"modification_id": ...}``."""
    raw = await request.body()
    logger.debug(f"Request Body: {raw!r}")

    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail={"code": "invalid_json", "message": "Invalid JSON in request body"},
        )

    modification_id = body.get("modification_id") if isinstance(body, dict) else None
    valid = isinstance(modification_id, (int, str)) and not isinstance(modification_id, bool)
    if not valid or modification_id == "":
        raise HTTPException(
            status_code=422,
            detail="'modification_id' must be a non-empty string or an integer",
        )

    result = await asyncio.to_thread(service.enrich, modification_id)
    return present_tyres(result, settings.site_base_url)
