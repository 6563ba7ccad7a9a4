"""Snapshot of everything the presentation layer needs after a transition."""

from dataclasses import dataclass, field
from typing import Optional

from knowledge_browser.core.entities import CategoryInfo, KnowledgeItem
from knowledge_browser.core.filter_state import FilterState


@dataclass
class BrowserView:
    """Browse results plus navigational facets for one filter state."""

    state: FilterState
    items: list[KnowledgeItem]
    total_count: int
    category_counts: dict[str, int]
    popular_tags: list[str]
    current_category: Optional[CategoryInfo] = None
    subcategories: tuple[str, ...] = field(default_factory=tuple)

    @property
    def result_count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def show_overview(self) -> bool:
        """Category overview is shown only when nothing narrows the catalog."""
        return self.state.is_default_view

    @property
    def show_popular_tags(self) -> bool:
        return not self.state.has_active_filters
