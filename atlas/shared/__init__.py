"""
Atlas Shared Kernel
===================

Architecture:
- core: EventBus, configuration, logging setup
- infrastructure: Technical adapters (HTTP data sources)
- domain: Business types (countries, fetch state, data source port)
"""

__all__ = []
