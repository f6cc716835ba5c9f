"""View helpers: option fragments, the tyre lookup response and search links."""

from html import escape
from typing import Iterable, Optional, Sequence
from urllib.parse import quote

from pydantic import BaseModel

from ..core.enums import LookupStatus
from ..models.result import Err, Result
from ..models.tyre import NOT_AVAILABLE, EnrichedTyreResult
from ..models.vehicle import CatalogRecord

NO_TYRES_MESSAGE = "No tyres found for this vehicle!"

EMPTY_OPTION_LABELS = {
    "brand": "No brands found",
    "model": "No models found",
    "year": "No years found",
    "modification": "No Modifications Found",
}


class TyreLookupResponse(BaseModel):
    status: LookupStatus
    tyres: list[EnrichedTyreResult]
    search_url: Optional[str] = None
    message: Optional[str] = None


def build_search_url(tokens: Iterable[str], site_base: str) -> str:
    """Storefront product search URL for a set of tyre sizes.

    Tokens are joined with ``+`` and percent-encoded, so
    ``["205/55R16", "225/45R17"]`` becomes ``s=205%2F55R16+225%2F45R17``.
    """
    terms = "+".join(quote(token, safe="") for token in tokens)
    return f"{site_base}?s={terms}&post_type=product"


def search_url_for(
    results: Sequence[EnrichedTyreResult], site_base: str
) -> Optional[str]:
    tokens: list[str] = []
    for result in results:
        if result.core_size != NOT_AVAILABLE and result.core_size not in tokens:
            tokens.append(result.core_size)
    if not tokens:
        return None
    return build_search_url(tokens, site_base)


def render_options(records: Sequence[CatalogRecord], empty_label: str) -> str:
    """``<option>`` list for a cascade select box."""
    if not records:
        return f"<option selected disabled>{escape(empty_label)}</option>"
    options = []
    for record in records:
        options.append(
            f'<option value="{escape(str(record.id))}">'
            f"{escape(record.display_name)}</option>"
        )
    return "".join(options)


def present_tyres(
    result: Result[list[EnrichedTyreResult]], site_base: str
) -> TyreLookupResponse:
    if isinstance(result, Err):
        return TyreLookupResponse(
            status=LookupStatus.ERROR, tyres=[], message=NO_TYRES_MESSAGE
        )
    tyres = result.value
    if not tyres:
        return TyreLookupResponse(
            status=LookupStatus.EMPTY, tyres=[], message=NO_TYRES_MESSAGE
        )
    return TyreLookupResponse(
        status=LookupStatus.OK,
        tyres=tyres,
        search_url=search_url_for(tyres, site_base),
    )
