"""Canonical event definitions for Atlas."""

from __future__ import annotations

import time
from typing import Any, Literal

from .event_bus import EventPayload

# Event Topics
TOPIC_STATE_CHANGED = "state.changed"
TOPIC_LOGS_EVENT = "logs.event"
TOPIC_REFRESH_DISCARDED = "refresh.discarded"


def create_state_changed_event(state: Any) -> EventPayload:
    """Create a state changed event carrying the new snapshot."""
    return {
        "state": state,
    }


def create_logs_event(
    message: str,
    level: Literal["warning", "error"] = "error",
    topic: str | None = None,
) -> EventPayload:
    """Create a Log event."""
    return {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }


def create_refresh_discarded_event(generation: int, latest: int) -> EventPayload:
    """Create an event for a refresh whose result was superseded.

    Args:
        generation: Generation number of the discarded call
        latest: Generation number that is current at discard time
    """
    return {
        "generation": generation,
        "latest": latest,
    }
