"""Typeahead suggestions for the search box."""

from knowledge_browser.core.catalog import Catalog
from knowledge_browser.core.entities import SearchSuggestion, SuggestionType


def suggest(catalog: Catalog, query: str, limit: int = 8) -> list[SearchSuggestion]:
    """Suggest items, tags and categories whose names contain the query.

    Items come first (catalog order), then tags (tag universe order), then
    categories. Matching is case-insensitive substring, like search itself.
    """
    if not query or limit <= 0:
        return []

    needle = query.lower()
    suggestions: list[SearchSuggestion] = []

    for item in catalog.items:
        if needle in item.title.lower():
            suggestions.append(SearchSuggestion(
                id=item.id,
                title=item.title,
                category=item.category.value,
                type=SuggestionType.ITEM,
            ))

    for tag in catalog.tags:
        if needle in tag.lower():
            suggestions.append(SearchSuggestion(
                id=tag,
                title=tag,
                category="",
                type=SuggestionType.TAG,
            ))

    for category in catalog.categories:
        names = (category.name, category.name_en, category.id.value)
        if any(needle in name.lower() for name in names):
            suggestions.append(SearchSuggestion(
                id=category.id.value,
                title=category.name,
                category=category.id.value,
                type=SuggestionType.CATEGORY,
            ))

    return suggestions[:limit]
