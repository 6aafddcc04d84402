"""Atlas package."""

from .explorer.state import ResourceStore, Store
from .shared.core.event_bus import EventBus

__all__ = ["EventBus", "ResourceStore", "Store"]
