"""Pytest configuration and shared fixtures."""

import copy
from typing import Any, Callable

import httpx
import pytest

from tyre_finder.services.catalog import CatalogConfig, RemoteCatalogClient
from tyre_finder.services.inventory import ProductRecord

BASE_URL = "https://catalog.test/api/v1/wheels"
BASE_PATH = "/api/v1/wheels/"


class RecordingSleep:
    """Stands in for ``time.sleep`` and remembers every requested delay."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class FakeProductSearch:
    """In-memory product store keyed by the exact search term."""

    def __init__(self, products: dict[str, ProductRecord] | None = None) -> None:
        self.products = products or {}
        self.queries: list[str] = []

    def search(self, term: str, limit: int = 1) -> list[ProductRecord]:
        self.queries.append(term)
        hit = self.products.get(term)
        return [hit] if hit else []


class CatalogStub:
    """MockTransport handler serving ``{"data": ...}`` per catalog path."""

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def paths(self) -> list[str]:
        return [r.url.path.removeprefix(BASE_PATH) for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(BASE_PATH)
        if path in self.routes:
            return httpx.Response(200, json={"data": self.routes[path]})
        return httpx.Response(404, json={"message": "not found"})


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_catalog(sleep: RecordingSleep):
    """Build a ``RemoteCatalogClient`` backed by a MockTransport handler."""
    clients: list[RemoteCatalogClient] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response], **config: Any
    ) -> RemoteCatalogClient:
        client = RemoteCatalogClient(
            CatalogConfig(base_url=BASE_URL, **config),
            transport=httpx.MockTransport(handler),
            sleep=sleep,
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


_TYRE_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": 11,
        "tyre": "205/55R16",
        "data_response": [
            {
                "technical": {
                    "bolt_pattern": "5x114.3",
                    "wheel_fasteners": {"type": "Lug nuts", "thread_size": "M12 x 1.5"},
                    "wheel_tightening_torque": "103 Nm",
                },
                "generation": {"bodies": [{"image": "https://img.test/corolla.jpg"}]},
                "wheels": [
                    {
                        "front": {
                            "tire_full": "205/55R16 91V",
                            "tire_weight_kg": 8.9,
                            "tire_diameter_mm": 632,
                            "rim": "6.5Jx16 ET45",
                            "tire_pressure": {"bar": 2.2, "kPa": 220, "psi": 32},
                        }
                    },
                    {"front": {"tire_full": "225/45R17 91W", "rim": "7Jx17 ET45"}},
                ],
            }
        ],
    },
    {
        "id": 12,
        "tyre": "195/65R15",
        "data_response": [
            {
                "technical": {"bolt_pattern": "5x100"},
                "wheels": [{"front": {"tire_full": "195/65R15 91H"}}],
            }
        ],
    },
]


@pytest.fixture
def tyre_payload() -> list[dict[str, Any]]:
    """Catalog ``/tyres/{id}`` data: two entries, three wheel records."""
    return copy.deepcopy(_TYRE_PAYLOAD)
