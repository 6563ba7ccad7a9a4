"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Sequence

from knowledge_browser.core.catalog import Catalog
from knowledge_browser.core.entities import CategoryInfo
from knowledge_browser.core.view import BrowserView


class CatalogLoader(ABC):
    """Interface for building the catalog at startup."""

    @abstractmethod
    def load(self) -> Catalog:
        """Load the full catalog."""
        pass


class ViewRenderer(ABC):
    """Interface for presenting browse results."""

    @abstractmethod
    def render(self, view: BrowserView, categories: Sequence[CategoryInfo]) -> str:
        """Render a view snapshot."""
        pass
