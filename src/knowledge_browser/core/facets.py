"""Navigational aggregates computed over the whole catalog."""

from typing import Iterable, Optional, Sequence

from knowledge_browser.core.entities import CategoryInfo, KnowledgeCategory, KnowledgeItem


def counts_by_category(
    items: Iterable[KnowledgeItem],
    categories: Optional[Sequence[CategoryInfo]] = None,
) -> dict[str, int]:
    """Count items per category.

    Pass the unfiltered catalog: the counts describe the whole corpus, not
    the current view.

    Args:
        items: Catalog items
        categories: Category definitions to report, in order. Defaults to
            every known category.

    Returns:
        Mapping of category id to item count (0 for empty categories)
    """
    if categories is None:
        counts = {category.value: 0 for category in KnowledgeCategory}
    else:
        counts = {category.id.value: 0 for category in categories}

    for item in items:
        key = item.category.value
        if key in counts:
            counts[key] += 1

    return counts


def collect_tags(items: Iterable[KnowledgeItem]) -> tuple[str, ...]:
    """Deduplicated tag universe in first-encountered order."""
    seen: dict[str, None] = {}
    for item in items:
        for tag in item.tags:
            seen.setdefault(tag, None)
    return tuple(seen)


def popular_tags(all_tags: Sequence[str], limit: int) -> list[str]:
    """First `limit` tags of the tag universe.

    This is not a frequency ranking: tags come back in the order they were
    first encountered while building the universe.
    """
    if limit <= 0:
        return []
    return list(all_tags[:limit])
