"""Shared fixtures for knowledge browser tests."""

from datetime import datetime, timezone

import pytest

from knowledge_browser.core import Catalog, CategoryInfo, KnowledgeCategory, KnowledgeItem


def build_item(
    id: str,
    title: str = "Untitled",
    category: KnowledgeCategory = KnowledgeCategory.THEORY,
    subcategory: str = "general",
    tags: tuple[str, ...] = (),
    description: str = "",
    views: int = 0,
    rating: float = 0.0,
    created_at: str = "2024-01-01",
    **kwargs,
) -> KnowledgeItem:
    """Build an item with sensible defaults for tests."""
    created = datetime.fromisoformat(created_at).replace(tzinfo=timezone.utc)
    return KnowledgeItem(
        id=id,
        title=title,
        description=description,
        category=category,
        subcategory=subcategory,
        tags=tags,
        author=kwargs.pop("author", "tester"),
        created_at=created,
        updated_at=kwargs.pop("updated_at", created),
        views=views,
        rating=rating,
        **kwargs,
    )


def build_category(
    category: KnowledgeCategory, subcategories: tuple[str, ...] = ("general",)
) -> CategoryInfo:
    return CategoryInfo(
        id=category,
        name=category.value.title(),
        name_en=category.value,
        description=f"{category.value} documents",
        icon="book",
        color="#000000",
        subcategories=subcategories,
    )


@pytest.fixture
def categories() -> list[CategoryInfo]:
    return [build_category(category) for category in KnowledgeCategory]


@pytest.fixture
def scenario_items() -> list[KnowledgeItem]:
    """Two-item catalog used throughout the engine tests."""
    return [
        build_item(
            "a",
            title="Alpha",
            category=KnowledgeCategory.THEORY,
            tags=("x",),
            views=10,
            rating=4.5,
            created_at="2024-01-01",
        ),
        build_item(
            "b",
            title="Beta",
            category=KnowledgeCategory.PAPERS,
            tags=("y",),
            views=50,
            rating=3.0,
            created_at="2024-06-01",
        ),
    ]


@pytest.fixture
def sample_items() -> list[KnowledgeItem]:
    """Larger catalog with overlapping tags and ties."""
    return [
        build_item(
            "t1",
            title="Design Methods",
            category=KnowledgeCategory.THEORY,
            subcategory="methods",
            tags=("design", "process"),
            description="A survey of design methodologies",
            views=100,
            rating=4.0,
            created_at="2024-03-01",
        ),
        build_item(
            "t2",
            title="Systems Thinking",
            category=KnowledgeCategory.THEORY,
            subcategory="systems",
            tags=("systems", "process"),
            description="Holistic view of engineering",
            views=100,
            rating=4.8,
            created_at="2024-03-01",
        ),
        build_item(
            "p1",
            title="Battery Thermal Paper",
            category=KnowledgeCategory.PAPERS,
            subcategory="journal",
            tags=("battery", "CFD"),
            description="Thermal runaway modelling",
            views=300,
            rating=4.0,
            created_at="2023-12-15",
        ),
        build_item(
            "s1",
            title="CFD Setup Guide",
            category=KnowledgeCategory.SIMULATION,
            subcategory="fluid",
            tags=("CFD", "tutorial"),
            description="Meshing and solver settings",
            views=50,
            rating=3.5,
            created_at="2024-05-20",
        ),
    ]


@pytest.fixture
def sample_catalog(categories, sample_items) -> Catalog:
    return Catalog.build(categories, sample_items)


@pytest.fixture
def make_item():
    """Factory for items with test defaults."""
    return build_item


@pytest.fixture
def make_category():
    """Factory for category definitions with test defaults."""
    return build_category
