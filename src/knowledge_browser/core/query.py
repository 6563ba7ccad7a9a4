"""Query engine: narrows and orders the catalog for a filter state."""

import unicodedata
from typing import Sequence

from knowledge_browser.core.entities import ALL, KnowledgeItem, SortKey
from knowledge_browser.core.filter_state import FilterState


def matches_category(item: KnowledgeItem, category: str) -> bool:
    return category == ALL or item.category == category


def matches_subcategory(item: KnowledgeItem, subcategory: str) -> bool:
    return subcategory == ALL or item.subcategory == subcategory


def matches_tags(item: KnowledgeItem, tags: Sequence[str]) -> bool:
    """
    Check whether the item carries at least one of the selected tags.

    Selecting several tags broadens the result (any-of), it never requires
    an item to carry all of them.

    Args:
        item: Catalog item
        tags: Selected tags

    Returns:
        True if no tags are selected or the item shares at least one tag
    """
    if not tags:
        return True
    return not set(item.tags).isdisjoint(tags)


def matches_search(item: KnowledgeItem, query: str) -> bool:
    """
    Case-insensitive substring match against title, description and tags.

    Each field is checked on its own, so a query never matches across the
    boundary between two fields.
    """
    if not query:
        return True

    needle = query.lower()
    if needle in item.title.lower():
        return True
    if needle in item.description.lower():
        return True
    return any(needle in tag.lower() for tag in item.tags)


def _char_class(ch: str) -> int:
    """Punctuation and spaces before digits, digits before letters."""
    if ch.isdigit():
        return 1
    if ch.isalpha():
        return 2
    return 0


def collation_key(text: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """Sort key approximating locale collation for titles.

    Primary: character class, then letters without accents or case.
    Secondary: accents. Tertiary: case, lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    primary = tuple((_char_class(ch), ch) for ch in base)
    return (primary, decomposed.casefold(), text.swapcase())


def sort_items(items: list[KnowledgeItem], sort_by: SortKey) -> list[KnowledgeItem]:
    """Return a stably sorted copy; equal keys keep their incoming order."""
    if sort_by == SortKey.NEWEST:
        return sorted(items, key=lambda item: item.created_at, reverse=True)
    if sort_by == SortKey.POPULAR:
        return sorted(items, key=lambda item: item.views, reverse=True)
    if sort_by == SortKey.RATING:
        return sorted(items, key=lambda item: item.rating, reverse=True)
    if sort_by == SortKey.NAME:
        return sorted(items, key=lambda item: collation_key(item.title))
    return list(items)


def apply(items: Sequence[KnowledgeItem], state: FilterState) -> list[KnowledgeItem]:
    """Filter and sort items for the given state.

    Pure: the input sequence is not modified and repeated calls with the same
    arguments give the same result. Unknown categories or subcategories
    simply produce an empty list.
    """
    result = [item for item in items if matches_category(item, state.category)]
    result = [item for item in result if matches_subcategory(item, state.subcategory)]
    result = [item for item in result if matches_tags(item, state.tags)]
    result = [item for item in result if matches_search(item, state.search_query)]

    return sort_items(result, state.sort_by)
