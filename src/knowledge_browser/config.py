"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from knowledge_browser.core import SortKey, ViewMode

CATALOG_PATH_ENV = "KNOWLEDGE_BROWSER_CATALOG"


@dataclass
class CatalogConfig:
    """Catalog source settings."""
    path: Path = Path("catalog.yaml")


@dataclass
class DisplayConfig:
    """Display settings."""
    popular_tags_limit: int = 15
    default_sort: SortKey = SortKey.NEWEST
    default_view: ViewMode = ViewMode.GRID
    grid_tag_limit: int = 4
    list_tag_limit: int = 3
    date_format: str = "%Y-%m-%d"


@dataclass
class Settings:
    """Application settings."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def catalog_path(self) -> Path:
        return self.catalog.path

    @property
    def popular_tags_limit(self) -> int:
        return self.display.popular_tags_limit


class ConfigError(ValueError):
    """Raised when config.yaml cannot be turned into Settings."""


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config YAML: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError("Config document must be a mapping")
    return config


def _apply_section(section: Any, name: str, values: Any, converters: dict) -> None:
    """Copy known keys of one config section onto its dataclass."""
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")

    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown key '{key}' in section '{name}'")
        if key in converters:
            try:
                value = converters[key](value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {name}.{key}: {value!r}") from e
        setattr(section, key, value)


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()

    if "catalog" in config:
        _apply_section(settings.catalog, "catalog", config["catalog"], {"path": Path})

    if "display" in config:
        _apply_section(settings.display, "display", config["display"], {
            "popular_tags_limit": int,
            "default_sort": SortKey,
            "default_view": ViewMode,
            "grid_tag_limit": int,
            "list_tag_limit": int,
            "date_format": str,
        })

    # Environment wins over the config file
    catalog_path = os.getenv(CATALOG_PATH_ENV)
    if catalog_path:
        settings.catalog.path = Path(catalog_path)

    return settings
