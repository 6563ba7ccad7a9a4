"""CLI entry point for knowledge browser."""

from pathlib import Path
from typing import List, Optional

import typer

from knowledge_browser.adapters.catalog import CatalogError, YamlCatalogLoader
from knowledge_browser.adapters.render import MarkdownRenderer
from knowledge_browser.adapters.render.icons import get_icon
from knowledge_browser.config import Settings, get_settings
from knowledge_browser.core import ALL, Catalog, FilterState, SortKey, ViewMode
from knowledge_browser.use_cases import BrowserService

app = typer.Typer(help="Browse a knowledge-base catalog by category, tag and search.")


def _load_settings(config: Path) -> Settings:
    try:
        return get_settings(config)
    except ValueError as e:
        print(f"❌ Invalid configuration in {config}: {e}")
        raise typer.Exit(code=1)


def _load_catalog(settings: Settings, catalog_path: Optional[Path]) -> Catalog:
    path = catalog_path or settings.catalog_path
    try:
        return YamlCatalogLoader(path).load()
    except CatalogError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)


@app.command()
def browse(
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="Catalog YAML file"),
    category: str = typer.Option(ALL, "--category", help="Category id or 'all'"),
    subcategory: str = typer.Option(ALL, "--subcategory", help="Subcategory or 'all'"),
    tag: Optional[List[str]] = typer.Option(None, "--tag", help="Tag filter (repeatable, any-of)"),
    search: str = typer.Option("", "--search", help="Case-insensitive search text"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort order"),
    view: Optional[ViewMode] = typer.Option(None, "--view", help="Display density"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write result to file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config YAML file"),
) -> None:
    """Filter, sort and render the catalog."""
    settings = _load_settings(config)
    kb_catalog = _load_catalog(settings, catalog)

    service = BrowserService(
        kb_catalog,
        state=FilterState(
            sort_by=settings.display.default_sort,
            view_mode=settings.display.default_view,
        ),
        popular_tags_limit=settings.popular_tags_limit,
    )

    # Replay the requested navigation as discrete user actions
    service.select_category(category)
    service.select_subcategory(subcategory)
    for selected in dict.fromkeys(tag or []):
        service.toggle_tag(selected)
    service.search(search)
    if sort is not None:
        service.sort_by(sort)
    if view is not None:
        service.set_view_mode(view)

    renderer = MarkdownRenderer(
        grid_tag_limit=settings.display.grid_tag_limit,
        list_tag_limit=settings.display.list_tag_limit,
        date_format=settings.display.date_format,
    )
    rendered = renderer.render(service.view(), kb_catalog.categories)

    if output is None:
        print(rendered)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    print(f"✓ Result saved to {output}")


@app.command()
def suggest(
    query: str = typer.Argument(..., help="Partial search text"),
    limit: int = typer.Option(8, "--limit", help="Maximum suggestions"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="Catalog YAML file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config YAML file"),
) -> None:
    """Show typeahead suggestions for a partial query."""
    settings = _load_settings(config)
    service = BrowserService(_load_catalog(settings, catalog))

    suggestions = service.suggest(query, limit)
    if not suggestions:
        print(f"No suggestions for '{query}'")
        return

    for suggestion in suggestions:
        print(f"[{suggestion.type.value}] {suggestion.title} ({suggestion.id})")


@app.command()
def categories(
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="Catalog YAML file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config YAML file"),
) -> None:
    """List categories with item counts and subcategories."""
    settings = _load_settings(config)
    service = BrowserService(_load_catalog(settings, catalog))
    view = service.view()

    print(f"📚 {view.total_count} entries in {len(service.catalog.categories)} categories\n")
    for category in service.catalog.categories:
        count = view.category_counts.get(category.id.value, 0)
        print(f"{get_icon(category.icon)} {category.name} [{category.id.value}]: {count}")
        for subcategory in category.subcategories:
            print(f"  • {subcategory}")


if __name__ == "__main__":
    app()
