"""Catalog loader for YAML documents."""

from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from knowledge_browser.core import (
    Catalog,
    CatalogLoader,
    CategoryInfo,
    KnowledgeCategory,
    KnowledgeItem,
)


class CatalogError(Exception):
    """Raised when a catalog document cannot be turned into a Catalog."""


def _get(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Read the first present key (camelCase or snake_case spelling)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _parse_timestamp(value: Any) -> datetime:
    """Accept YAML dates/datetimes and ISO 8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        # fromisoformat before 3.11 does not accept a trailing Z
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Invalid timestamp: {value!r}")


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class YamlCatalogLoader(CatalogLoader):
    """Load categories and items from a YAML file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Catalog:
        """Read, validate and build the catalog."""
        if not self.path.exists():
            raise CatalogError(f"Catalog file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Malformed catalog YAML in {self.path}: {e}") from e

        return self.parse(data)

    def parse(self, data: dict[str, Any]) -> Catalog:
        """Build a catalog from an already-decoded document."""
        if not isinstance(data, dict):
            raise CatalogError("Catalog document must be a mapping")

        raw_categories = data.get("categories")
        raw_items = data.get("items")
        if not isinstance(raw_categories, list):
            raise CatalogError("Catalog must define a 'categories' list")
        if not isinstance(raw_items, list):
            raise CatalogError("Catalog must define an 'items' list")

        categories = [self._parse_category(raw) for raw in raw_categories]
        items = [self._parse_item(raw, index) for index, raw in enumerate(raw_items)]

        try:
            catalog = Catalog.build(categories, items)
        except ValueError as e:
            raise CatalogError(str(e)) from e

        self._warn_unknown_subcategories(catalog)
        return catalog

    def _parse_category(self, raw: dict[str, Any]) -> CategoryInfo:
        try:
            return CategoryInfo(
                id=KnowledgeCategory(raw["id"]),
                name=str(raw.get("name", raw["id"])),
                name_en=str(_get(raw, "nameEn", "name_en", default="")),
                description=str(raw.get("description", "")),
                icon=str(raw.get("icon", "")),
                color=str(raw.get("color", "")),
                subcategories=tuple(str(s) for s in raw.get("subcategories") or []),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CatalogError(f"Invalid category {raw!r}: {e}") from e

    def _parse_item(self, raw: dict[str, Any], index: int) -> KnowledgeItem:
        label = raw.get("id", f"#{index}") if isinstance(raw, dict) else f"#{index}"
        try:
            created_at = _parse_timestamp(_get(raw, "createdAt", "created_at"))
            updated_raw = _get(raw, "updatedAt", "updated_at")
            updated_at = _parse_timestamp(updated_raw) if updated_raw is not None else created_at
            downloads = raw.get("downloads")

            return KnowledgeItem(
                id=str(raw["id"]),
                title=str(raw["title"]),
                description=str(raw.get("description", "")),
                category=KnowledgeCategory(raw["category"]),
                subcategory=str(raw.get("subcategory", "")),
                tags=tuple(str(tag) for tag in raw.get("tags") or []),
                author=str(raw.get("author", "")),
                created_at=created_at,
                updated_at=updated_at,
                views=int(raw.get("views", 0)),
                rating=float(raw.get("rating", 0)),
                downloads=int(downloads) if downloads is not None else None,
                file_type=_optional_str(_get(raw, "fileType", "file_type")),
                file_size=_optional_str(_get(raw, "fileSize", "file_size")),
                thumbnail=_optional_str(raw.get("thumbnail")),
                content=_optional_str(raw.get("content")),
                external_url=_optional_str(_get(raw, "externalUrl", "external_url")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CatalogError(f"Invalid item {label}: {e}") from e

    def _warn_unknown_subcategories(self, catalog: Catalog) -> None:
        for item in catalog.items:
            category = catalog.get_category(item.category)
            if category and item.subcategory not in category.subcategories:
                print(
                    f"⚠️  Warning: item {item.id} uses subcategory '{item.subcategory}' "
                    f"not listed under {category.id.value}"
                )
