"""
Shared Domain Module
====================

Business types shared by every Atlas front end.
"""

from atlas.shared.domain.countries import Country, DataSource, FetchState, FetchStatus

__all__ = [
    "Country",
    "DataSource",
    "FetchState",
    "FetchStatus",
]
