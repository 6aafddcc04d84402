"""Immutable resource state for a single remote list fetch.

The store is the only writer of its ``FetchState``. Replacing the state and
notifying observers happen in one step (``_replace``), so there is no way to
change what observers see without telling them.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, Union

from atlas.shared.core import events
from atlas.shared.core.event_bus import EventBus, EventPayload, Unsubscribe
from atlas.shared.domain.countries.models import FetchState, RecordT
from atlas.shared.domain.countries.ports import DataSource
from atlas.shared.infrastructure.http.base import DataFetchError

logger = logging.getLogger(__name__)

Observer = Callable[[FetchState], Union[Awaitable[None], None]]


class ResourceStore(Generic[RecordT]):
    """Owns one FetchState and every transition of it.

    Each ``refresh()`` takes a new generation number. Only the newest
    generation may write a terminal state: when calls overlap, the earlier
    call's result is dropped and observers see ``loading, loading, <result of
    the later call>``.

    Usage:
        store = ResourceStore(CountryService())
        unsubscribe = store.subscribe(view.show)
        await store.refresh()
    """

    def __init__(
        self,
        source: DataSource[RecordT],
        event_bus: Optional[EventBus] = None,
        name: str = "countries",
    ) -> None:
        """Initialize the store in the idle, empty state.

        Args:
            source: Data source queried on every refresh
            event_bus: Bus used to deliver transitions, a private one by default
            name: Topic prefix, keeps several stores apart on a shared bus
        """
        self.source = source
        self.bus = event_bus or EventBus()
        self.name = name

        self._state: FetchState[RecordT] = FetchState()
        # Last non-loading state, restored when an in-flight refresh is cancelled
        self._settled: FetchState[RecordT] = self._state
        self._generation = 0

    @property
    def state_topic(self) -> str:
        return f"{self.name}.{events.TOPIC_STATE_CHANGED}"

    @property
    def generation(self) -> int:
        return self._generation

    # --- Public Actions ---

    def current_state(self) -> FetchState[RecordT]:
        """Return the latest snapshot."""
        return self._state

    def subscribe(self, observer: Observer) -> Unsubscribe:
        """Register an observer called with each new FetchState.

        Observers run in registration order. An observer that raises is
        logged and skipped; the others still run.

        Args:
            observer: Callable or coroutine function taking the new state

        Returns:
            A callable that removes the observer
        """
        def deliver(payload: EventPayload) -> Union[Awaitable[None], None]:
            return observer(payload["state"])

        deliver.__name__ = getattr(observer, "__name__", repr(observer))
        return self.bus.subscribe(self.state_topic, deliver)

    async def refresh(self) -> FetchState[RecordT]:
        """Fetch from the source and move through loading to a terminal state.

        Returns once the terminal state has been delivered to every observer.
        A call superseded by a newer one returns the current state without
        notifying.

        Raises:
            asyncio.CancelledError: The calling task was cancelled mid-fetch;
                the pre-refresh state has been restored by then
        """
        self._generation += 1
        generation = self._generation
        previous = self._state
        logger.info(f"Refreshing '{self.name}' (generation {generation})")

        try:
            await self._replace(previous.as_loading())
            records = await self.source.fetch_all()
        except asyncio.CancelledError:
            if generation == self._generation:
                logger.info(f"Refresh of '{self.name}' cancelled, restoring previous state")
                await self._replace(self._settled)
            raise
        except DataFetchError as exc:
            message = exc.description
            level = "warning"
            logger.warning(f"Refresh of '{self.name}' failed: {message}")
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            level = "error"
            logger.exception(f"Unexpected error refreshing '{self.name}'")
        else:
            if await self._is_superseded(generation):
                return self._state
            await self._replace(previous.with_items(records))
            logger.debug(f"Refresh of '{self.name}' loaded {len(self._state.items)} item(s)")
            return self._state

        if await self._is_superseded(generation):
            return self._state
        await self._replace(previous.with_error(message))
        await self.bus.publish(
            events.TOPIC_LOGS_EVENT,
            events.create_logs_event(message, level=level, topic=self.state_topic),
        )
        return self._state

    # --- Internals ---

    async def _replace(self, state: FetchState[RecordT]) -> None:
        """Swap in a new snapshot and deliver it."""
        self._state = state
        if not state.is_loading:
            self._settled = state
        await self.bus.publish(self.state_topic, events.create_state_changed_event(state))

    async def _is_superseded(self, generation: int) -> bool:
        if generation == self._generation:
            return False
        logger.info(
            f"Discarding result of '{self.name}' generation {generation}, "
            f"generation {self._generation} is newer"
        )
        await self.bus.publish(
            events.TOPIC_REFRESH_DISCARDED,
            events.create_refresh_discarded_event(generation, self._generation),
        )
        return True
