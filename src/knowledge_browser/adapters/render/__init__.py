"""Presentation adapters."""

from knowledge_browser.adapters.render.markdown_renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
