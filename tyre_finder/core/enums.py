"""Enums shared by the catalog client, the cascade and the presenter."""

from enum import Enum


class FailureKind(str, Enum):
    """Why a remote catalog round-trip failed."""

    TRANSPORT = "transport"  # network error, timeout, non-2xx status
    PARSE = "parse"  # invalid JSON, missing or malformed ``data``


class CascadeStage(str, Enum):
    """Vehicle selection stages, in cascade order."""

    BRAND = "brand"
    MODEL = "model"
    YEAR = "year"
    MODIFICATION = "modification"

    @classmethod
    def ordered(cls) -> list["CascadeStage"]:
        return [cls.BRAND, cls.MODEL, cls.YEAR, cls.MODIFICATION]

    @classmethod
    def from_string(cls, value: str | None) -> "CascadeStage | None":
        """Convert string to enum, returning None if invalid."""
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class LookupStatus(str, Enum):
    """Outcome of a tyre lookup as reported to the UI."""

    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"
