"""Immutable State Management for the Explorer.

Architecture:
- ResourceStore: Owns one FetchState, replaces it wholesale and notifies observers
- Store: Composition root holding the application's resource stores
"""

from .resource_store import Observer, ResourceStore
from .store import Store

__all__ = ["Observer", "ResourceStore", "Store"]
