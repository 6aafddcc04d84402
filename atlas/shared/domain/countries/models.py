"""Country records and the fetch state that holds them.

Both models are frozen: a transition never edits a FetchState, it builds the
next one. ``Country.from_api`` is the only place raw API payloads are
defaulted, so nothing downstream re-checks record fields.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Generic, Iterable, Mapping, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

RecordT = TypeVar("RecordT")

UNKNOWN = "Unknown"
NO_CAPITAL = "N/A"


def _nested(payload: Mapping[str, Any], parent: str, key: str) -> Any:
    section = payload.get(parent)
    if isinstance(section, Mapping):
        return section.get(key)
    return None


def _text(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        if not math.isfinite(value):
            return None
    except OverflowError:
        # integer too large for a float
        return None
    return value


class Country(BaseModel):
    """One normalized country entry."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = UNKNOWN
    capital: str = NO_CAPITAL
    population: int = Field(default=0, ge=0)
    region: str = UNKNOWN
    flag: str = ""
    area: float = 0.0

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Country":
        """Build a Country from one element of the REST Countries array.

        Absent or mistyped fields fall back to defaults instead of raising.
        """
        capitals = payload.get("capital")
        capital = NO_CAPITAL
        if isinstance(capitals, list) and capitals and isinstance(capitals[0], str):
            capital = capitals[0]

        population = _number(payload.get("population"))
        area = _number(payload.get("area"))

        return cls(
            name=_text(_nested(payload, "name", "common"), UNKNOWN),
            capital=capital,
            population=max(int(population), 0) if population is not None else 0,
            region=_text(payload.get("region"), UNKNOWN),
            flag=_text(_nested(payload, "flags", "png"), ""),
            area=float(area) if area is not None else 0.0,
        )


class FetchStatus(str, Enum):
    """Which of the three mutually exclusive conditions a snapshot is in."""
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class FetchState(BaseModel, Generic[RecordT]):
    """Immutable snapshot of a list fetch."""
    model_config = ConfigDict(frozen=True)

    items: Tuple[RecordT, ...] = ()
    is_loading: bool = False
    error_message: str = ""

    @model_validator(mode="after")
    def _check_exclusive(self) -> "FetchState[RecordT]":
        if self.is_loading and self.error_message:
            raise ValueError("a loading state cannot carry an error message")
        return self

    @property
    def status(self) -> FetchStatus:
        if self.is_loading:
            return FetchStatus.LOADING
        if self.error_message:
            return FetchStatus.ERROR
        return FetchStatus.IDLE

    @property
    def is_empty(self) -> bool:
        return not self.items

    def as_loading(self) -> "FetchState[RecordT]":
        """Next state when a fetch starts: items kept, error cleared."""
        return type(self)(items=self.items, is_loading=True)

    def with_items(self, items: Iterable[RecordT]) -> "FetchState[RecordT]":
        """Terminal state for a successful fetch."""
        return type(self)(items=tuple(items))

    def with_error(self, message: str, items: Optional[Iterable[RecordT]] = None) -> "FetchState[RecordT]":
        """Terminal state for a failed fetch; items default to the current ones."""
        kept = self.items if items is None else tuple(items)
        return type(self)(items=kept, error_message=message or "Unknown error")
