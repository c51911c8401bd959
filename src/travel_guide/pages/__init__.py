"""Page data loaders: locale redirects, page payloads and SEO documents."""

from .article_page import ArticlePageResult, load_article_page, pick_related_articles
from .homepage import HomepageLoadResult, generate_static_paths, load_homepage, site_locales
from .seo import (
    load_locale_sitemap,
    load_robots_txt,
    load_sitemap_index,
    render_locale_sitemap,
    render_robots_txt,
    render_sitemap_index,
    resolve_base_url,
)

__all__ = [
    "ArticlePageResult",
    "HomepageLoadResult",
    "generate_static_paths",
    "load_article_page",
    "load_homepage",
    "load_locale_sitemap",
    "load_robots_txt",
    "load_sitemap_index",
    "pick_related_articles",
    "render_locale_sitemap",
    "render_robots_txt",
    "render_sitemap_index",
    "resolve_base_url",
    "site_locales",
]
