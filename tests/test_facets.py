"""Tests for facet summary aggregates."""

from knowledge_browser.core import KnowledgeCategory
from knowledge_browser.core.facets import collect_tags, counts_by_category, popular_tags


def test_counts_by_category_covers_every_category(sample_items) -> None:
    """Test every category is reported, including empty ones."""
    counts = counts_by_category(sample_items)

    assert set(counts) == {category.value for category in KnowledgeCategory}
    assert counts["theory"] == 2
    assert counts["papers"] == 1
    assert counts["simulation"] == 1
    assert counts["patents"] == 0
    assert sum(counts.values()) == len(sample_items)


def test_counts_by_category_follows_given_categories(sample_items, make_category) -> None:
    """Test counts only for the given category definitions, in order."""
    categories = [
        make_category(KnowledgeCategory.SIMULATION),
        make_category(KnowledgeCategory.THEORY),
    ]
    counts = counts_by_category(sample_items, categories)

    assert list(counts) == ["simulation", "theory"]
    assert counts == {"simulation": 1, "theory": 2}


def test_counts_by_category_empty() -> None:
    """Test empty catalog gives zero counts."""
    assert all(count == 0 for count in counts_by_category([]).values())


def test_collect_tags_first_encountered_order(make_item) -> None:
    """Test tag universe is deduplicated in first-seen order."""
    items = [
        make_item("1", tags=("b", "a")),
        make_item("2", tags=("a", "c")),
        make_item("3", tags=("b",)),
    ]
    assert collect_tags(items) == ("b", "a", "c")


def test_popular_tags_is_first_n() -> None:
    """Test popular tags are the first N of the universe, not ranked."""
    universe = ("rare", "common", "other")
    assert popular_tags(universe, 2) == ["rare", "common"]


def test_popular_tags_limits() -> None:
    """Test limit larger than universe and non-positive limits."""
    universe = ("a", "b")
    assert popular_tags(universe, 15) == ["a", "b"]
    assert popular_tags(universe, 0) == []
    assert popular_tags(universe, -1) == []
