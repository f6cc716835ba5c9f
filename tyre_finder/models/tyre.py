"""Tyre records: the catalog detail payload and the enriched display record.

The ``*Payload`` models describe the nested ``/tyres/{modification}`` response.
Containers (``data_response``, ``wheels``, ``front``) are required so a payload
of the wrong shape fails validation; leaf values are optional scalars of any
type and become the ``"N/A"`` sentinel on the display record when missing.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .vehicle import CatalogId

NOT_AVAILABLE = "N/A"

Scalar = Union[int, float, str]


# ---------------------------------------------------------------------------
# Catalog detail payload
# ---------------------------------------------------------------------------


class TyrePressure(BaseModel):
    bar: Optional[Scalar] = None
    kPa: Optional[Scalar] = None
    psi: Optional[Scalar] = None


class FrontWheelPayload(BaseModel):
    tire_full: Optional[Scalar] = None
    tire_weight_kg: Optional[Scalar] = None
    tire_diameter_mm: Optional[Scalar] = None
    rim: Optional[Scalar] = None
    tire_pressure: Optional[Union[TyrePressure, Scalar]] = None


class WheelFastenersPayload(BaseModel):
    type: Optional[Scalar] = None
    thread_size: Optional[Scalar] = None


class TechnicalPayload(BaseModel):
    bolt_pattern: Optional[Scalar] = None
    wheel_fasteners: Optional[WheelFastenersPayload] = None
    wheel_tightening_torque: Optional[Scalar] = None


class BodyPayload(BaseModel):
    image: Optional[Scalar] = None


class GenerationPayload(BaseModel):
    bodies: list[BodyPayload] = Field(default_factory=list)


class WheelPairPayload(BaseModel):
    front: FrontWheelPayload


class DataResponsePayload(BaseModel):
    wheels: list[WheelPairPayload]
    technical: Optional[TechnicalPayload] = None
    generation: Optional[GenerationPayload] = None

    @property
    def image(self) -> Optional[Scalar]:
        """Image of the first body of the generation, if any."""
        if self.generation and self.generation.bodies:
            return self.generation.bodies[0].image
        return None


class TyreDetailEntry(BaseModel):
    id: Optional[CatalogId] = None
    tyre: Optional[str] = None
    data_response: list[DataResponsePayload]


# ---------------------------------------------------------------------------
# Display records
# ---------------------------------------------------------------------------


class TyreSpec(BaseModel):
    """Tyre/wheel specification; unknown values hold ``NOT_AVAILABLE``."""

    model_config = ConfigDict(frozen=True)

    tire_full: str = NOT_AVAILABLE
    tire_weight_kg: Scalar = NOT_AVAILABLE
    tire_diameter_mm: Scalar = NOT_AVAILABLE
    rim: Scalar = NOT_AVAILABLE
    bolt_pattern: Scalar = NOT_AVAILABLE
    wheel_fasteners_type: Scalar = NOT_AVAILABLE
    wheel_fasteners_thread_size: Scalar = NOT_AVAILABLE
    wheel_tightening_torque: Scalar = NOT_AVAILABLE
    tire_pressure: Union[TyrePressure, Scalar] = NOT_AVAILABLE
    image: Scalar = NOT_AVAILABLE


class InventoryMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: Optional[CatalogId] = None
    permalink: str = "#"
    available: bool = False

    @classmethod
    def unavailable(cls) -> "InventoryMatch":
        return cls()


class EnrichedTyreResult(TyreSpec):
    """A ``TyreSpec`` merged with its inventory lookup outcome."""

    core_size: str = NOT_AVAILABLE
    product_id: Optional[CatalogId] = None
    permalink: str = "#"
    available: bool = False

    @classmethod
    def merge(
        cls, spec: TyreSpec, match: InventoryMatch, core_size: Optional[str]
    ) -> "EnrichedTyreResult":
        return cls(
            **spec.model_dump(),
            **match.model_dump(),
            core_size=core_size or NOT_AVAILABLE,
        )
