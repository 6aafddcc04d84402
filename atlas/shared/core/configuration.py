"""
Configuration Management System for Atlas

This module provides a centralized configuration system that supports a 4-tier
precedence hierarchy: environment → project → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class SourceConfig(BaseModel):
    """Remote country data source"""
    model_config = ConfigDict(extra='forbid')

    url: str = Field(default="https://restcountries.com/v3.1/all", description="Countries endpoint")
    fields: List[str] = Field(
        default_factory=lambda: ["name", "capital", "population", "region", "flags", "area"],
        description="Field selection sent as the 'fields' query parameter",
    )
    timeout: float = Field(default=30.0, ge=1.0, le=300.0, description="Request timeout (seconds)")


class LoggingConfig(BaseModel):
    """Logging Configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="INFO", description="File log level")
    console_level: str = Field(default="WARNING", description="Terminal log level")
    log_file: Optional[str] = Field(default="data/logs/atlas.log", description="Rotating log file, None disables it")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024, description="Rotate after this many bytes")
    backup_count: int = Field(default=5, ge=0, le=100)


class ViewConfig(BaseModel):
    """Console view Configuration"""
    model_config = ConfigDict(extra='forbid')

    title: str = Field(default="Countries Explorer", description="Heading shown above the list")
    limit: Optional[int] = Field(default=None, ge=1, description="Max rows rendered, None shows all")
    prompt_retry: bool = Field(default=True, description="Offer a retry prompt after a failed load")


class AppConfig(BaseModel):
    """Complete application configuration"""
    model_config = ConfigDict(extra='forbid')

    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# (section, key, converter)
ENV_MAP: Dict[str, tuple] = {
    'ATLAS_SOURCE_URL': ('source', 'url', str),
    'ATLAS_SOURCE_TIMEOUT': ('source', 'timeout', float),
    'ATLAS_LOG_LEVEL': ('logging', 'level', str.upper),
    'ATLAS_LOG_FILE': ('logging', 'log_file', str),
    'ATLAS_VIEW_LIMIT': ('view', 'limit', int),
}


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
        self._system_config: Optional[AppConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

    def _load_system_defaults(self) -> AppConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")

            try:
                self._system_config = AppConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = AppConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")

        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")

        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()

        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())

        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, convert) in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = convert(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: not a valid {config_key}")
                continue
            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> AppConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return AppConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return AppConfig()


def get_config(
    config_dir: Optional[Path] = None,
    validation_level: ValidationLevel = ValidationLevel.STRICT,
) -> AppConfig:
    """Load the merged configuration from ``config_dir`` (packaged settings by default)."""
    return ConfigManager(config_dir).get_config(validation_level)
