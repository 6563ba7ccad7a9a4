"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

ALL = "all"


class KnowledgeCategory(str, Enum):
    """Top-level category of a knowledge item."""

    THEORY = "theory"
    STANDARDS = "standards"
    PAPERS = "papers"
    PATENTS = "patents"
    CASES_POSITIVE = "cases-positive"
    CASES_NEGATIVE = "cases-negative"
    SIMULATION = "simulation"
    SOFTWARE_GUIDES = "software-guides"


class SortKey(str, Enum):
    """Sort order for browse results."""

    NEWEST = "newest"
    POPULAR = "popular"
    RATING = "rating"
    NAME = "name"


class ViewMode(str, Enum):
    """Display density."""

    GRID = "grid"
    LIST = "list"


class SuggestionType(str, Enum):
    """Kind of search suggestion."""

    ITEM = "item"
    TAG = "tag"
    CATEGORY = "category"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class KnowledgeItem:
    """A single document in the catalog."""

    id: str
    title: str
    description: str
    category: KnowledgeCategory
    subcategory: str
    tags: tuple[str, ...]
    author: str
    created_at: datetime
    updated_at: datetime
    views: int
    rating: float
    downloads: Optional[int] = None
    file_type: Optional[str] = None
    file_size: Optional[str] = None
    thumbnail: Optional[str] = None
    content: Optional[str] = None
    external_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ID cannot be empty")
        if not self.title:
            raise ValueError("Title cannot be empty")
        if self.views < 0:
            raise ValueError("Views cannot be negative")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "created_at", _as_utc(self.created_at))
        object.__setattr__(self, "updated_at", _as_utc(self.updated_at))


@dataclass(frozen=True)
class CategoryInfo:
    """Definition of a top-level category and its subcategories."""

    id: KnowledgeCategory
    name: str
    name_en: str
    description: str
    icon: str
    color: str
    subcategories: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "subcategories", tuple(self.subcategories))


@dataclass(frozen=True)
class SearchSuggestion:
    """Typeahead entry offered for a partial search query."""

    id: str
    title: str
    category: str
    type: SuggestionType
