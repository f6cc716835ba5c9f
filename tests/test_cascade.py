"""Tests for the client-side cascade selection state."""

from tyre_finder.core.enums import CascadeStage
from tyre_finder.services.cascade import CascadeSelection


class TestCascadeSelection:
    def test_starts_at_brand(self):
        state = CascadeSelection()
        assert state.next_stage is CascadeStage.BRAND
        assert not state.is_complete

    def test_walks_forward(self):
        state = (
            CascadeSelection()
            .select(CascadeStage.BRAND, "7")
            .select(CascadeStage.MODEL, 1)
            .select(CascadeStage.YEAR, 20)
        )
        assert state.next_stage is CascadeStage.MODIFICATION

        done = state.select(CascadeStage.MODIFICATION, "m-1")
        assert done.is_complete
        assert done.next_stage is None

    def test_reselecting_clears_later_stages(self):
        state = CascadeSelection(brand="7", model=1, year=20, modification="m-1")

        changed = state.select(CascadeStage.MODEL, 2)

        assert changed == CascadeSelection(brand="7", model=2)
        assert changed.next_stage is CascadeStage.YEAR

    def test_select_returns_new_state(self):
        state = CascadeSelection(brand="7")
        state.select(CascadeStage.BRAND, "8")
        assert state.brand == "7"

    def test_stage_from_string(self):
        assert CascadeStage.from_string("Model") is CascadeStage.MODEL
        assert CascadeStage.from_string("tyre") is None
        assert CascadeStage.from_string(None) is None
