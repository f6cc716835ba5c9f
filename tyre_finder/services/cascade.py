"""Client-side selection state for the vehicle cascade.

The UI owns one ``CascadeSelection``. Picking a value at any stage
invalidates every later stage, since those ids are scoped by the earlier
choice.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import CascadeStage
from ..models.vehicle import CatalogId


@dataclass(frozen=True)
class CascadeSelection:
    brand: Optional[CatalogId] = None
    model: Optional[CatalogId] = None
    year: Optional[CatalogId] = None
    modification: Optional[CatalogId] = None

    def select(self, stage: CascadeStage, value: CatalogId) -> "CascadeSelection":
        """Return a new selection with ``stage`` set and later stages cleared."""
        stages = CascadeStage.ordered()
        cleared = {s.value: None for s in stages[stages.index(stage) + 1 :]}
        return replace(self, **{stage.value: value}, **cleared)

    def value_of(self, stage: CascadeStage) -> Optional[CatalogId]:
        return getattr(self, stage.value)

    @property
    def next_stage(self) -> Optional[CascadeStage]:
        """First stage still waiting for a choice; ``None`` once complete."""
        for stage in CascadeStage.ordered():
            if self.value_of(stage) is None:
                return stage
        return None

    @property
    def is_complete(self) -> bool:
        return self.modification is not None
