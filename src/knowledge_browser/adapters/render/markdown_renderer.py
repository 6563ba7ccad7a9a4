"""Markdown renderer for browse views."""

from typing import Sequence

from knowledge_browser.adapters.render.icons import get_file_icon, get_icon
from knowledge_browser.core import ALL, BrowserView, CategoryInfo, KnowledgeItem, ViewMode, ViewRenderer


class MarkdownRenderer(ViewRenderer):
    """Render a browse view as Markdown in grid or list density."""

    def __init__(
        self,
        grid_tag_limit: int = 4,
        list_tag_limit: int = 3,
        date_format: str = "%Y-%m-%d",
    ) -> None:
        self.grid_tag_limit = grid_tag_limit
        self.list_tag_limit = list_tag_limit
        self.date_format = date_format

    def render(self, view: BrowserView, categories: Sequence[CategoryInfo]) -> str:
        """Render header, facets and results."""
        title = view.current_category.name if view.current_category else "All content"

        lines = [
            f"# {title}",
            "",
            f"{view.result_count} items",
            "",
        ]

        if view.show_overview:
            lines.extend(self._format_overview(view, categories))

        if view.subcategories:
            lines.extend(self._format_subcategories(view))

        if view.state.tags:
            selected = " ".join(f"`{tag}`" for tag in view.state.tags)
            lines.extend([f"**Selected tags:** {selected}", ""])

        if view.show_popular_tags and view.popular_tags:
            popular = " ".join(f"`{tag}`" for tag in view.popular_tags)
            lines.extend([f"**Popular tags:** {popular}", ""])

        if view.is_empty:
            lines.extend([
                "🔍 No matching content found.",
                "",
                "Try adjusting the search terms or tag filters.",
            ])
            return "\n".join(lines)

        for item in view.items:
            if view.state.view_mode == ViewMode.LIST:
                lines.extend(self._format_list_entry(item))
            else:
                lines.extend(self._format_grid_entry(item))

        return "\n".join(lines)

    def _format_overview(self, view: BrowserView, categories: Sequence[CategoryInfo]) -> list[str]:
        lines = ["## Categories", ""]
        for category in categories:
            count = view.category_counts.get(category.id.value, 0)
            label = f"{category.name} ({category.name_en})" if category.name_en else category.name
            lines.append(f"- {get_icon(category.icon)} **{label}**: {count} items")
        lines.extend([
            "",
            f"*{view.total_count} entries in {len(categories)} categories*",
            "",
        ])
        return lines

    def _format_subcategories(self, view: BrowserView) -> list[str]:
        options = [ALL, *view.subcategories]
        parts = [
            f"**[{option}]**" if option == view.state.subcategory else option
            for option in options
        ]
        return [f"**Subcategories:** {' | '.join(parts)}", ""]

    def _format_tags(self, tags: Sequence[str], limit: int) -> str:
        shown = " ".join(f"`{tag}`" for tag in tags[:limit])
        if len(tags) > limit:
            shown += f" +{len(tags) - limit}"
        return shown

    def _format_heading(self, item: KnowledgeItem) -> str:
        if item.external_url:
            return f"### {get_file_icon(item.file_type)} [{item.title}]({item.external_url})"
        return f"### {get_file_icon(item.file_type)} {item.title}"

    def _format_grid_entry(self, item: KnowledgeItem) -> list[str]:
        """Card: type badge, description, tags, stats and update date."""
        file_type = (item.file_type or "DOC").upper()
        lines = [self._format_heading(item), "", f"**{file_type}**", ""]
        if item.description:
            lines.extend([item.description, ""])
        if item.tags:
            lines.append(self._format_tags(item.tags, self.grid_tag_limit))

        lines.append(
            f"👁 {item.views} | ⭐ {item.rating} | 🕒 {item.updated_at.strftime(self.date_format)}"
        )
        lines.extend(["", "---", ""])
        return lines

    def _format_list_entry(self, item: KnowledgeItem) -> list[str]:
        """Row: description, fewer tags, stats, file type and size."""
        lines = [self._format_heading(item), ""]
        if item.description:
            lines.extend([item.description, ""])
        if item.tags:
            lines.append(self._format_tags(item.tags, self.list_tag_limit))

        meta_parts = [
            part for part in (
                f"👁 {item.views}",
                f"⭐ {item.rating}",
                item.file_type,
                item.file_size,
            ) if part
        ]
        lines.append(f"*{' | '.join(meta_parts)}*")
        lines.extend(["", "---", ""])
        return lines
