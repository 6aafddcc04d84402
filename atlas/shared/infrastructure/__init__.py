"""
Shared Infrastructure Module
=============================

Technical adapters for external systems.
"""

from atlas.shared.infrastructure.http import (
    CountryService,
    DataFetchError,
    ParseError,
    TransportError,
)

__all__ = [
    "CountryService",
    "DataFetchError",
    "ParseError",
    "TransportError",
]
