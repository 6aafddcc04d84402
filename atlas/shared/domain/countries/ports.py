"""Data source port consumed by the resource store."""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

RecordT_co = TypeVar("RecordT_co", covariant=True)


@runtime_checkable
class DataSource(Protocol[RecordT_co]):
    """Fetches the full list of records from a remote endpoint.

    Implementations raise ``DataFetchError`` when the transport fails or the
    response does not have the expected shape. They never cache or retry.
    """

    async def fetch_all(self) -> Sequence[RecordT_co]:
        ...
