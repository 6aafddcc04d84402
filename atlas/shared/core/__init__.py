"""
Shared Core Module
==================

Event system, configuration and logging setup.
"""

# Event System
from .event_bus import EventBus, EventPayload, Unsubscribe
from . import events

# Configuration
from .configuration import (
    AppConfig,
    ConfigManager,
    LoggingConfig,
    SourceConfig,
    ValidationLevel,
    ViewConfig,
    get_config,
)
from .logging_config import configure_logging

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "Unsubscribe",
    "events",
    # Configuration
    "AppConfig",
    "ConfigManager",
    "LoggingConfig",
    "SourceConfig",
    "ValidationLevel",
    "ViewConfig",
    "get_config",
    # Logging
    "configure_logging",
]
