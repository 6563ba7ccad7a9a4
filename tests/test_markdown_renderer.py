"""Tests for markdown view renderer."""

import pytest

from knowledge_browser.adapters.render import MarkdownRenderer
from knowledge_browser.adapters.render.icons import DEFAULT_ICON, get_file_icon, get_icon
from knowledge_browser.core import Catalog, KnowledgeCategory, ViewMode
from knowledge_browser.use_cases import BrowserService


@pytest.fixture
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture
def tagged_catalog(categories, make_item) -> Catalog:
    items = [
        make_item(
            "d1",
            title="Many Tags",
            category=KnowledgeCategory.PAPERS,
            tags=("a", "b", "c", "d", "e"),
            description="Long description text",
            author="Li Wei",
            views=42,
            rating=4.5,
            file_type="pdf",
            file_size="1 MB",
            external_url="https://example.com/d1",
        ),
    ]
    return Catalog.build(categories, items)


def test_default_view_shows_overview(renderer, sample_catalog) -> None:
    """Test overview and popular tags on the default view."""
    view = BrowserService(sample_catalog).view()
    output = renderer.render(view, sample_catalog.categories)

    assert output.startswith("# All content")
    assert "4 items" in output
    assert "## Categories" in output
    assert "**Theory (theory)**: 2 items" in output
    assert "*4 entries in 8 categories*" in output
    assert "**Popular tags:** `design` `process`" in output


def test_filtered_view_hides_overview(renderer, sample_catalog) -> None:
    """Test category selection shows its name and subcategories."""
    service = BrowserService(sample_catalog)
    view = service.select_category("theory")
    output = renderer.render(view, sample_catalog.categories)

    assert output.startswith("# Theory")
    assert "## Categories" not in output
    assert "**Subcategories:** **[all]** | general" in output


def test_selected_tags_replace_popular_tags(renderer, sample_catalog) -> None:
    """Test tag chips shown and popular tags hidden while filtering."""
    view = BrowserService(sample_catalog).toggle_tag("CFD")
    output = renderer.render(view, sample_catalog.categories)

    assert "**Selected tags:** `CFD`" in output
    assert "Popular tags" not in output


def test_grid_card_details(renderer, tagged_catalog) -> None:
    """Test grid cards show description, four tags and update date."""
    view = BrowserService(tagged_catalog).view()
    output = renderer.render(view, tagged_catalog.categories)

    assert "### 📕 [Many Tags](https://example.com/d1)" in output
    assert "**PDF**" in output
    assert "Long description text" in output
    assert "`a` `b` `c` `d` +1" in output
    assert "👁 42 | ⭐ 4.5 | 🕒 2024-01-01" in output
    assert "1 MB" not in output


def test_list_row_details(renderer, tagged_catalog) -> None:
    """Test list rows show three tags with file type and size."""
    service = BrowserService(tagged_catalog)
    view = service.set_view_mode(ViewMode.LIST)
    output = renderer.render(view, tagged_catalog.categories)

    assert "[Many Tags](https://example.com/d1)" in output
    assert "Long description text" in output
    assert "`a` `b` `c` +2" in output
    assert "*👁 42 | ⭐ 4.5 | pdf | 1 MB*" in output
    assert "🕒" not in output


def test_tag_limits_configurable(tagged_catalog) -> None:
    """Test tag limits passed to the renderer are honoured."""
    renderer = MarkdownRenderer(grid_tag_limit=2)
    output = renderer.render(BrowserService(tagged_catalog).view(), tagged_catalog.categories)

    assert "`a` `b` +3" in output


def test_empty_state(renderer, sample_catalog) -> None:
    """Test empty result renders a no-results message."""
    view = BrowserService(sample_catalog).search("no such thing")
    output = renderer.render(view, sample_catalog.categories)

    assert "0 items" in output
    assert "No matching content found." in output


def test_icon_lookups() -> None:
    """Test icon tables fall back to the default icon."""
    assert get_icon("code") == "💻"
    assert get_icon("unknown") == DEFAULT_ICON
    assert get_file_icon("PDF") == "📕"
    assert get_file_icon(None) == DEFAULT_ICON
