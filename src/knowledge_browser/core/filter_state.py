"""Filter state value object and its transitions.

Every transition returns a new FilterState; the previous value is never
modified. The state has no hidden fields, so the value itself is the whole
navigation state of a browsing session.
"""

from dataclasses import dataclass, replace

from knowledge_browser.core.entities import ALL, SortKey, ViewMode


@dataclass(frozen=True)
class FilterState:
    """Current narrowing, ordering and display choices."""

    category: str = ALL
    subcategory: str = ALL
    tags: tuple[str, ...] = ()
    search_query: str = ""
    sort_by: SortKey = SortKey.NEWEST
    view_mode: ViewMode = ViewMode.GRID

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def has_active_filters(self) -> bool:
        """True when a tag selection or a search query narrows the results."""
        return bool(self.tags) or bool(self.search_query)

    @property
    def is_default_view(self) -> bool:
        """True when nothing narrows the catalog (overview is shown)."""
        return self.category == ALL and not self.has_active_filters


DEFAULT_FILTER_STATE = FilterState()


def set_category(state: FilterState, category: str) -> FilterState:
    """Select a top-level category; subcategory choices reset to all."""
    return replace(state, category=category, subcategory=ALL)


def set_subcategory(state: FilterState, subcategory: str) -> FilterState:
    return replace(state, subcategory=subcategory)


def toggle_tag(state: FilterState, tag: str) -> FilterState:
    """Remove the tag if it is selected, otherwise append it."""
    if tag in state.tags:
        return replace(state, tags=tuple(t for t in state.tags if t != tag))
    return replace(state, tags=state.tags + (tag,))


def clear_tags(state: FilterState) -> FilterState:
    return replace(state, tags=())


def set_search_query(state: FilterState, query: str) -> FilterState:
    """Store the query verbatim; normalization happens at match time."""
    return replace(state, search_query=query)


def set_sort_by(state: FilterState, sort_by: SortKey) -> FilterState:
    return replace(state, sort_by=SortKey(sort_by))


def set_view_mode(state: FilterState, view_mode: ViewMode) -> FilterState:
    return replace(state, view_mode=ViewMode(view_mode))
