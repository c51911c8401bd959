"""Article page data loading."""

import logging
from dataclasses import dataclass, field

from schemas import Article, Website

from ..cms import CmsService
from ..i18n import get_default_language, is_valid_language
from .homepage import site_locales

logger = logging.getLogger(__name__)

RELATED_ARTICLES_LIMIT = 3


@dataclass
class ArticlePageResult:
    """Data for one article page.

    Attributes:
        website_data: Website in the requested locale, None when unavailable
        article: The article, None when not found
        related_articles: Up to three other articles, tag-sharing ones first
        supported_locales: Locales the website is published in
        active_locale: Locale the page renders in
        redirect: Path to redirect to; None when the page renders
        not_found: True when the website loaded but the slug is unknown
    """

    website_data: Website | None = None
    article: Article | None = None
    related_articles: list[Article] = field(default_factory=list)
    supported_locales: list[str] = field(default_factory=list)
    active_locale: str = "en"
    redirect: str | None = None
    not_found: bool = False


def pick_related_articles(
    article: Article,
    candidates: list[Article],
    limit: int = RELATED_ARTICLES_LIMIT,
) -> list[Article]:
    """Other articles to suggest, those sharing a tag with article first.

    Candidate order is preserved within each group.
    """
    tag_slugs = {tag.slug for tag in article.tags if tag.slug}
    others = [candidate for candidate in candidates if candidate.slug != article.slug]

    sharing = [c for c in others if tag_slugs & {tag.slug for tag in c.tags}]
    rest = [c for c in others if c not in sharing]
    return (sharing + rest)[:limit]


def load_article_page(service: CmsService, locale: str, slug: str) -> ArticlePageResult:
    """Load an article page, redirecting unsupported locales to the fallback."""
    website = service.get_localized_website_data(locale)
    if website is None:
        logger.warning(f"Website data unavailable for article {slug!r}")
        return ArticlePageResult(active_locale=locale)

    supported_locales = site_locales(website)
    result = ArticlePageResult(
        website_data=website,
        supported_locales=supported_locales,
        active_locale=website.locale,
    )

    if not is_valid_language(locale, supported_locales) or website.locale != locale:
        fallback_locale = get_default_language(supported_locales, website.default_locale)
        result.redirect = f"/{fallback_locale}"
        return result

    article = service.get_article_by_slug(slug, locale)
    if article is None:
        logger.info(f"Article {slug!r} not found in locale {locale}")
        result.not_found = True
        return result

    result.article = article
    result.related_articles = pick_related_articles(article, service.get_articles(locale))
    return result
