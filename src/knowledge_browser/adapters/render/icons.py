"""Lookup tables from symbolic names to terminal-friendly icons."""

from typing import Optional

CATEGORY_ICONS: dict[str, str] = {
    "book": "📘",
    "book-open": "📖",
    "file-text": "📄",
    "file-check": "✅",
    "graduation-cap": "🎓",
    "award": "🏅",
    "lightbulb": "💡",
    "thumbs-up": "👍",
    "alert-triangle": "⚠️",
    "cpu": "🖥️",
    "code": "💻",
    "settings": "⚙️",
}

FILE_TYPE_ICONS: dict[str, str] = {
    "pdf": "📕",
    "doc": "📝",
    "docx": "📝",
    "ppt": "📊",
    "pptx": "📊",
    "xls": "📈",
    "xlsx": "📈",
    "video": "🎬",
    "mp4": "🎬",
    "link": "🔗",
}

DEFAULT_ICON = "📄"


def get_icon(name: str) -> str:
    return CATEGORY_ICONS.get(name, DEFAULT_ICON)


def get_file_icon(file_type: Optional[str]) -> str:
    if not file_type:
        return DEFAULT_ICON
    return FILE_TYPE_ICONS.get(file_type.lower(), DEFAULT_ICON)
