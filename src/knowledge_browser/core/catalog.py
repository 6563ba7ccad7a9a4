"""In-memory catalog of knowledge items."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from knowledge_browser.core.entities import CategoryInfo, KnowledgeCategory, KnowledgeItem
from knowledge_browser.core.facets import collect_tags


@dataclass(frozen=True)
class Catalog:
    """Static item list, category definitions and derived tag universe."""

    categories: tuple[CategoryInfo, ...]
    items: tuple[KnowledgeItem, ...]
    tags: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "tags", collect_tags(self.items))

    @classmethod
    def build(
        cls, categories: Iterable[CategoryInfo], items: Iterable[KnowledgeItem]
    ) -> "Catalog":
        """Create a catalog, rejecting duplicate ids and unknown categories."""
        categories = tuple(categories)
        items = tuple(items)

        known: set[KnowledgeCategory] = set()
        for category in categories:
            if category.id in known:
                raise ValueError(f"Duplicate category id: {category.id.value}")
            known.add(category.id)

        seen_ids: set[str] = set()
        for item in items:
            if item.id in seen_ids:
                raise ValueError(f"Duplicate item id: {item.id}")
            seen_ids.add(item.id)
            if item.category not in known:
                raise ValueError(
                    f"Item {item.id} references unknown category: {item.category.value}"
                )

        return cls(categories=categories, items=items)

    def get_category(self, category_id: str) -> Optional[CategoryInfo]:
        """Look up a category definition; None for 'all' or unknown ids."""
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def get_item(self, item_id: str) -> Optional[KnowledgeItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self.items)
