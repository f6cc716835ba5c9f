"""Blocking client for the remote wheel/tyre catalog API.

Every endpoint answers ``{"data": [...]}``. A call is retried a fixed number
of times and never raises: an exhausted retry budget comes back as a
``FetchFailure`` value that callers treat as "no data available".
"""

import time
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import quote

import httpx

from ..core.config import Settings, get_settings
from ..core.enums import FailureKind
from ..core.logging import log_catalog_attempt, log_external_call, logger


@dataclass(frozen=True)
class CatalogConfig:
    base_url: str
    timeout: float = 60.0
    max_attempts: int = 3
    retry_delay: float = 2.0

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CatalogConfig":
        settings = settings or get_settings()
        return cls(
            base_url=settings.catalog_base_url,
            timeout=settings.catalog_timeout,
            max_attempts=settings.catalog_max_attempts,
            retry_delay=settings.catalog_retry_delay,
        )


@dataclass(frozen=True)
class FetchFailure:
    kind: FailureKind
    url: str
    attempts: int
    reason: str

    @property
    def message(self) -> str:
        return (
            f"Failed to fetch {self.url} after {self.attempts} attempts "
            f"({self.kind.value}: {self.reason})"
        )


class _EnvelopeError(ValueError):
    """The body is JSON but not a ``{"data": [...]}`` envelope."""


def _unwrap(payload: Any) -> list[Any]:
    if not isinstance(payload, dict) or "data" not in payload:
        raise _EnvelopeError("response has no 'data' field")
    data = payload["data"]
    if not isinstance(data, list):
        raise _EnvelopeError(f"'data' is {type(data).__name__}, expected list")
    return data


def _segment(value: Any) -> str:
    """Encode an id as a single path segment."""
    return quote(str(value), safe="")


class RemoteCatalogClient:
    """Client for the catalog's brand/model/year/modification/tyre lists."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self._sleep = sleep
        self.client = httpx.Client(
            headers={"Accept": "application/json"},
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> "RemoteCatalogClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def fetch_list(self, path: str) -> list[Any] | FetchFailure:
        """GET ``path`` and return the ``data`` list, retrying on failure.

        Transport errors (network, timeout, non-2xx) and parse errors
        (invalid JSON, missing ``data``) both consume one attempt. Attempts
        are separated by ``retry_delay`` seconds; there is no delay after
        the last one.
        """
        url = self.url_for(path)
        max_attempts = self.config.max_attempts
        kind = FailureKind.TRANSPORT
        reason = ""

        for attempt in range(1, max_attempts + 1):
            start = time.time()
            try:
                resp = self.client.get(url)
                resp.raise_for_status()
                data = _unwrap(resp.json())
            except httpx.HTTPError as e:
                kind, reason = FailureKind.TRANSPORT, str(e) or type(e).__name__
            except ValueError as e:
                # json.JSONDecodeError and _EnvelopeError
                kind, reason = FailureKind.PARSE, str(e)
            else:
                log_external_call(
                    "catalog", path, True, (time.time() - start) * 1000
                )
                return data

            log_catalog_attempt(url, attempt, max_attempts, kind.value, reason)
            if attempt < max_attempts:
                self._sleep(self.config.retry_delay)

        log_external_call("catalog", path, False)
        failure = FetchFailure(kind=kind, url=url, attempts=max_attempts, reason=reason)
        logger.error(failure.message)
        return failure

    # -- documented catalog paths -------------------------------------------

    def brands(self) -> list[Any] | FetchFailure:
        return self.fetch_list("brands")

    def models(self, brand_id: Any) -> list[Any] | FetchFailure:
        return self.fetch_list(f"models/{_segment(brand_id)}")

    def years(self, model_id: Any) -> list[Any] | FetchFailure:
        return self.fetch_list(f"years/{_segment(model_id)}")

    def modifications(self, year_id: Any) -> list[Any] | FetchFailure:
        return self.fetch_list(f"modifications/{_segment(year_id)}")

    def tyres(self, modification_id: Any) -> list[Any] | FetchFailure:
        return self.fetch_list(f"tyres/{_segment(modification_id)}")

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()
