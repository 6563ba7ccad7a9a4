"""Business logic use cases."""

from typing import Optional

from knowledge_browser.core import (
    DEFAULT_FILTER_STATE,
    BrowserView,
    Catalog,
    FilterState,
    SearchSuggestion,
    SortKey,
    ViewMode,
)
from knowledge_browser.core import filter_state as transitions
from knowledge_browser.core.facets import counts_by_category, popular_tags
from knowledge_browser.core.query import apply
from knowledge_browser.core.suggestions import suggest


class BrowserService:
    """Browsing session over a catalog.

    Owns the single current FilterState. Every action swaps in a new state
    produced by a pure transition and returns a view recomputed from scratch.
    """

    def __init__(
        self,
        catalog: Catalog,
        state: Optional[FilterState] = None,
        popular_tags_limit: int = 15,
    ) -> None:
        self.catalog = catalog
        self.popular_tags_limit = popular_tags_limit
        self._initial_state = state or DEFAULT_FILTER_STATE
        self._state = self._initial_state

    @property
    def state(self) -> FilterState:
        return self._state

    def view(self) -> BrowserView:
        """Recompute results and facets for the current state."""
        state = self._state
        current_category = self.catalog.get_category(state.category)

        return BrowserView(
            state=state,
            items=apply(self.catalog.items, state),
            total_count=len(self.catalog),
            category_counts=counts_by_category(self.catalog.items, self.catalog.categories),
            popular_tags=popular_tags(self.catalog.tags, self.popular_tags_limit),
            current_category=current_category,
            subcategories=current_category.subcategories if current_category else (),
        )

    def select_category(self, category: str) -> BrowserView:
        self._state = transitions.set_category(self._state, category)
        return self.view()

    def select_subcategory(self, subcategory: str) -> BrowserView:
        self._state = transitions.set_subcategory(self._state, subcategory)
        return self.view()

    def toggle_tag(self, tag: str) -> BrowserView:
        self._state = transitions.toggle_tag(self._state, tag)
        return self.view()

    def clear_tags(self) -> BrowserView:
        self._state = transitions.clear_tags(self._state)
        return self.view()

    def search(self, query: str) -> BrowserView:
        self._state = transitions.set_search_query(self._state, query)
        return self.view()

    def sort_by(self, sort_by: SortKey) -> BrowserView:
        self._state = transitions.set_sort_by(self._state, sort_by)
        return self.view()

    def set_view_mode(self, view_mode: ViewMode) -> BrowserView:
        self._state = transitions.set_view_mode(self._state, view_mode)
        return self.view()

    def reset(self) -> BrowserView:
        """Return to the state the session started with."""
        self._state = self._initial_state
        return self.view()

    def suggest(self, query: str, limit: int = 8) -> list[SearchSuggestion]:
        return suggest(self.catalog, query, limit)
