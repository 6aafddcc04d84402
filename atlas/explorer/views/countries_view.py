"""Console rendering of the country list state."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from atlas.explorer.state.resource_store import ResourceStore
from atlas.shared.core.event_bus import Unsubscribe
from atlas.shared.domain.countries.models import Country, FetchState, FetchStatus

logger = logging.getLogger(__name__)

ACCENT = "#4299E1"
ERROR = "#E53E3E"


def format_population(number: int) -> str:
    """Compact population: 1.23B, 4.56M, 7.89K or the plain number."""
    if number >= 1_000_000_000:
        return f"{number / 1_000_000_000:.2f}B"
    elif number >= 1_000_000:
        return f"{number / 1_000_000:.2f}M"
    elif number >= 1_000:
        return f"{number / 1_000:.2f}K"
    return str(number)


class CountriesView:
    """Reads FetchState and prints it. Never writes state."""

    def __init__(
        self,
        console: Optional[Console] = None,
        title: str = "Countries Explorer",
        limit: Optional[int] = None,
    ) -> None:
        self.console = console or Console()
        self.title = title
        self.limit = limit
        self._unsubscribe: Optional[Unsubscribe] = None

    def attach(self, store: ResourceStore[Country]) -> Unsubscribe:
        """Subscribe to the store and render every transition."""
        self.detach()
        self._unsubscribe = store.subscribe(self.show)
        return self.detach

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def show(self, state: FetchState[Country]) -> None:
        self.console.print(self.render(state))

    def render(self, state: FetchState[Country]) -> RenderableType:
        status = state.status
        if status is FetchStatus.LOADING:
            return Spinner("dots", text=Text("Loading countries...", style=ACCENT))

        if status is FetchStatus.ERROR:
            return Panel(
                Group(
                    Text("Oops! Something went wrong", style="bold"),
                    Text(state.error_message, style="grey50"),
                    Text("Retry to load the list again.", style=ACCENT),
                ),
                title="Error",
                border_style=ERROR,
            )

        if state.is_empty:
            return Text("No countries found", style="grey50")

        return self._build_table(state.items)

    def _build_table(self, countries: tuple[Country, ...]) -> Table:
        shown = countries if self.limit is None else countries[: self.limit]
        table = Table(title=self.title, header_style=f"bold {ACCENT}")
        table.add_column("Name", style="bold")
        table.add_column("Capital")
        table.add_column("Region")
        table.add_column("Population", justify="right")
        table.add_column("Flag", overflow="fold")

        for country in shown:
            table.add_row(
                country.name,
                country.capital,
                country.region,
                format_population(country.population),
                country.flag,
            )

        if len(shown) < len(countries):
            table.caption = f"Showing {len(shown)} of {len(countries)} countries"
        return table
