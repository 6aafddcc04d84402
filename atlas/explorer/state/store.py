"""Application state container.

Built once at start-up and handed to whatever reads or triggers state; there
is no global lookup.
"""

from __future__ import annotations

from typing import Optional

import httpx

from .resource_store import ResourceStore
from atlas.shared.core.configuration import AppConfig
from atlas.shared.core.event_bus import EventBus
from atlas.shared.domain.countries.models import Country
from atlas.shared.infrastructure.http.country_service import CountryService


class Store:
    """State store for the explorer application.

    Usage:
        # During app initialization
        store = Store.create(config)

        # In any component that was given the store
        store.countries.subscribe(view.show)
        await store.countries.refresh()
    """

    def __init__(self, countries: ResourceStore[Country], event_bus: EventBus) -> None:
        """Initialize store with its resource stores.

        Args:
            countries: Store for the country list
            event_bus: The shared event bus instance
        """
        self.bus = event_bus
        self.countries = countries

    @classmethod
    def create(
        cls,
        config: AppConfig,
        client: Optional[httpx.AsyncClient] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "Store":
        """Wire the country service and its store from configuration.

        Args:
            config: Loaded application configuration
            client: Optional HTTP client shared with the service
            event_bus: Optional bus, a new one otherwise

        Returns:
            The assembled store
        """
        bus = event_bus or EventBus()
        service = CountryService(config.source, client=client)
        return cls(ResourceStore(service, event_bus=bus, name="countries"), bus)

    async def aclose(self) -> None:
        """Release the data source's HTTP client and drop subscriptions."""
        source = self.countries.source
        if isinstance(source, CountryService):
            await source.aclose()
        self.bus.clear()
