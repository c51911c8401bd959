"""Jinja2 page renderer.

Turns page load results into complete HTML documents. All fallback
chains for display values are resolved in travel_guide.pages.view_model
before the templates see them.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas import Website

from ..clients import HttpRequestRecord
from ..config import SiteConfig
from ..i18n import build_localized_url, get_language_info
from ..pages import ArticlePageResult, HomepageLoadResult
from ..pages import view_model
from .filters import FILTERS, make_media_url_filter

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
PLACEHOLDER_IMAGE = "/images/placeholder.jpg"


class PageRenderer:
    """Render homepage, article, fallback and redirect documents.

    Attributes:
        config: Site configuration; cms_url resolves media and
            is_development enables the debug panel
        templates_dir: Directory containing the page templates
    """

    def __init__(self, config: SiteConfig, templates_dir: Path | None = None):
        self.config = config
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func
        self._env.filters["media_url"] = make_media_url_filter(config.cms_url)
        self._env.globals["localized_url"] = build_localized_url
        self._env.globals["language_info"] = get_language_info
        self._env.globals["placeholder_image"] = PLACEHOLDER_IMAGE

    def render(self, template_name: str, **context) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context)

    def _site_context(
        self,
        website: Website | None,
        locale: str,
        supported_locales: list[str],
        tags: list | None = None,
        requests: list[HttpRequestRecord] | None = None,
    ) -> dict:
        """Context shared by every page: branding, navigation and debug data."""
        return {
            "website": website,
            "locale": locale,
            "supported_locales": supported_locales,
            "show_language_selector": len(supported_locales) > 1,
            "brand_name": view_model.brand_display_name(website),
            "brand_styles": view_model.brand_styles(website),
            "colors": view_model.theme_colors(website),
            "labels": view_model.system_labels(website),
            "nav_links": view_model.build_nav_links(website, tags or [], locale),
            "show_debug": self.config.is_development,
            "requests": requests or [],
        }

    def render_homepage(
        self,
        result: HomepageLoadResult,
        requests: list[HttpRequestRecord] | None = None,
    ) -> str:
        """Render a locale homepage, or the fallback page when data is missing."""
        website = result.website_data
        if website is None:
            return self.render_fallback(locale=result.active_locale)

        context = self._site_context(
            website,
            result.active_locale,
            result.supported_locales,
            tags=result.tags,
            requests=requests,
        )
        context.update(
            title=view_model.seo_title(website),
            description=view_model.seo_description(website),
            tagline=view_model.tagline(website),
            articles=result.articles,
            tags=result.tags,
        )
        return self.render("homepage.html.j2", **context)

    def render_article_page(
        self,
        result: ArticlePageResult,
        requests: list[HttpRequestRecord] | None = None,
    ) -> str:
        website = result.website_data
        if website is None or result.article is None:
            message = "Article not found" if result.not_found else None
            return self.render_fallback(message=message, website=website, locale=result.active_locale)

        article = result.article
        context = self._site_context(
            website,
            result.active_locale,
            result.supported_locales,
            tags=website.tags,
            requests=requests,
        )
        context.update(
            title=(article.seo.meta_title if article.seo and article.seo.meta_title else article.title),
            description=(
                article.seo.meta_description
                if article.seo and article.seo.meta_description
                else article.summary or view_model.seo_description(website)
            ),
            article=article,
            reading_time=article.reading_time or view_model.compute_reading_time(article.body),
            related_articles=result.related_articles,
        )
        return self.render("article.html.j2", **context)

    def render_fallback(
        self,
        message: str | None = None,
        website: Website | None = None,
        locale: str = "en",
    ) -> str:
        """Page shown when website data could not be loaded."""
        logger.debug(f"Rendering fallback page for locale {locale}")
        context = self._site_context(website, locale, [locale])
        context.update(title=view_model.brand_display_name(website), description="", message=message)
        return self.render("fallback.html.j2", **context)

    def render_redirect(self, target: str) -> str:
        """Static redirect document pointing at target."""
        return self.render("redirect.html.j2", target=target)
