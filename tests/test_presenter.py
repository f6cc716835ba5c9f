"""Tests for option fragments, tyre lookup responses and search links."""

from tyre_finder.api.presenter import (
    NO_TYRES_MESSAGE,
    build_search_url,
    present_tyres,
    render_options,
    search_url_for,
)
from tyre_finder.core.enums import LookupStatus
from tyre_finder.models.result import Err, Ok
from tyre_finder.models.tyre import EnrichedTyreResult
from tyre_finder.models.vehicle import Brand, VehicleModel


def _tyre(core_size: str, **kwargs) -> EnrichedTyreResult:
    return EnrichedTyreResult(core_size=core_size, **kwargs)


class TestSearchUrl:
    def test_tokens_joined_and_encoded(self):
        url = build_search_url(["205/55R16", "225/45R17"], "https://x.test/")
        assert url == "https://x.test/?s=205%2F55R16+225%2F45R17&post_type=product"

    def test_single_token(self):
        url = build_search_url(["195/65R15"], "https://x.test/")
        assert url == "https://x.test/?s=195%2F65R15&post_type=product"

    def test_url_for_results_dedupes_and_skips_unknown(self):
        results = [
            _tyre("205/55R16"),
            _tyre("N/A"),
            _tyre("225/45R17"),
            _tyre("205/55R16"),
        ]
        url = search_url_for(results, "https://x.test/")
        assert url == "https://x.test/?s=205%2F55R16+225%2F45R17&post_type=product"

    def test_url_for_results_without_sizes(self):
        assert search_url_for([_tyre("N/A")], "https://x.test/") is None


class TestRenderOptions:
    def test_one_option_per_record(self):
        html = render_options(
            [
                VehicleModel(id=1, display_name="Corolla", parent_brand_id="7"),
                VehicleModel(id=2, display_name="Yaris", parent_brand_id="7"),
            ],
            "No models found",
        )
        assert html == (
            '<option value="1">Corolla</option><option value="2">Yaris</option>'
        )

    def test_values_are_escaped(self):
        html = render_options(
            [Brand(id='x"y', display_name="<Mercedes & Co>")], "No brands found"
        )
        assert html == '<option value="x&quot;y">&lt;Mercedes &amp; Co&gt;</option>'

    def test_empty_list_renders_disabled_placeholder(self):
        assert (
            render_options([], "No years found")
            == "<option selected disabled>No years found</option>"
        )


class TestPresentTyres:
    def test_ok(self):
        tyres = [_tyre("205/55R16", tire_full="205/55R16 91V")]
        response = present_tyres(Ok(tyres), "https://x.test/")

        assert response.status is LookupStatus.OK
        assert response.tyres == tyres
        assert response.search_url == (
            "https://x.test/?s=205%2F55R16&post_type=product"
        )
        assert response.message is None

    def test_empty(self):
        response = present_tyres(Ok([]), "https://x.test/")
        assert response.status is LookupStatus.EMPTY
        assert response.tyres == []
        assert response.message == NO_TYRES_MESSAGE

    def test_error_is_distinguished_from_empty(self):
        response = present_tyres(Err("catalog down"), "https://x.test/")
        assert response.status is LookupStatus.ERROR
        assert response.tyres == []
        assert response.search_url is None
