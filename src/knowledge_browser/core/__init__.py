"""Core domain layer."""

from knowledge_browser.core.catalog import Catalog
from knowledge_browser.core.entities import (
    ALL,
    CategoryInfo,
    KnowledgeCategory,
    KnowledgeItem,
    SearchSuggestion,
    SortKey,
    SuggestionType,
    ViewMode,
)
from knowledge_browser.core.filter_state import DEFAULT_FILTER_STATE, FilterState
from knowledge_browser.core.interfaces import CatalogLoader, ViewRenderer
from knowledge_browser.core.view import BrowserView

__all__ = [
    "ALL",
    "BrowserView",
    "Catalog",
    "CatalogLoader",
    "CategoryInfo",
    "DEFAULT_FILTER_STATE",
    "FilterState",
    "KnowledgeCategory",
    "KnowledgeItem",
    "SearchSuggestion",
    "SortKey",
    "SuggestionType",
    "ViewMode",
    "ViewRenderer",
]
