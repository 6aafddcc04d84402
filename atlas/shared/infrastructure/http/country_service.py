"""REST Countries data source."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from atlas.shared.core.configuration import SourceConfig
from atlas.shared.domain.countries.models import Country
from atlas.shared.infrastructure.http.base import DataFetchError, ParseError, TransportError

logger = logging.getLogger(__name__)


class CountryService:
    """Fetches every country in one GET and maps each entry to a ``Country``.

    Pass ``client`` to share a connection pool or to swap the transport in
    tests; otherwise a short-lived ``httpx.AsyncClient`` is opened per call.
    """

    def __init__(
        self,
        config: Optional[SourceConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or SourceConfig()
        self._client = client

    @property
    def params(self) -> dict[str, str]:
        return {"fields": ",".join(self.config.fields)}

    async def fetch_all(self) -> List[Country]:
        """Return one Country per array element, in response order.

        Raises:
            TransportError: Non-200 response
            ParseError: Body is not a JSON array of objects
            DataFetchError: Network failure before a response arrived
        """
        logger.debug(f"GET {self.config.url} params={self.params}")
        try:
            if self._client is not None:
                response = await self._client.get(
                    self.config.url, params=self.params, timeout=self.config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.get(self.config.url, params=self.params)
        except httpx.HTTPError as exc:
            raise DataFetchError(f"Error fetching countries: {exc}") from exc

        if response.status_code != 200:
            logger.warning(f"Countries endpoint returned HTTP {response.status_code}")
            raise TransportError(response.status_code)

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"invalid JSON ({exc})") from exc

        countries = self.parse(payload)
        logger.info(f"Fetched {len(countries)} countries")
        return countries

    @staticmethod
    def parse(payload: Any) -> List[Country]:
        """Map a decoded response body to countries."""
        if not isinstance(payload, list):
            raise ParseError(f"expected a JSON array, got {type(payload).__name__}")

        countries: List[Country] = []
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict):
                raise ParseError(f"element {index} is {type(entry).__name__}, not an object")
            countries.append(Country.from_api(entry))
        return countries

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> "CountryService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

