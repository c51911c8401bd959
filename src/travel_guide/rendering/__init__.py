"""HTML rendering with Jinja2."""

from .filters import FILTERS, format_date, make_media_url_filter, render_markdown, tag_names
from .renderer import TEMPLATES_DIR, PageRenderer

__all__ = [
    "FILTERS",
    "PageRenderer",
    "TEMPLATES_DIR",
    "format_date",
    "make_media_url_filter",
    "render_markdown",
    "tag_names",
]
