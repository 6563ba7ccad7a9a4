"""Catalog loading adapters."""

from knowledge_browser.adapters.catalog.yaml_loader import CatalogError, YamlCatalogLoader

__all__ = ["CatalogError", "YamlCatalogLoader"]
