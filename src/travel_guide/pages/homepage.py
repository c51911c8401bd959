"""Homepage data loading and locale redirects."""

import logging
from dataclasses import dataclass, field

from schemas import Article, Tag, Website

from ..cms import CmsService
from ..i18n import get_default_language, is_valid_language

logger = logging.getLogger(__name__)

FALLBACK_LOCALES = ["en", "pt", "es", "fr", "it"]
FALLBACK_ACTIVE_LOCALE = "en"


@dataclass
class HomepageLoadResult:
    """Everything the homepage renders, or the redirect to issue instead.

    Attributes:
        website_data: Website in the active locale, None when unavailable
        articles: Articles for the requested locale
        tags: Tags for the requested locale
        supported_locales: Locales the website is published in
        active_locale: Locale of the loaded website data
        requested_locale: Locale from the URL, if any
        redirect: Path to redirect to; None when the page renders
    """

    website_data: Website | None = None
    articles: list[Article] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    supported_locales: list[str] = field(default_factory=list)
    active_locale: str = FALLBACK_ACTIVE_LOCALE
    requested_locale: str | None = None
    redirect: str | None = None


def site_locales(website: Website) -> list[str]:
    """Supported locales of a website, or its default locale alone."""
    return list(website.supported_locales) or [website.default_locale]


def generate_static_paths(service: CmsService) -> list[dict]:
    """One path entry per locale to pre-render.

    Falls back to a fixed locale list when the website cannot be loaded.
    """
    website = service.get_website_data()
    if website is None:
        logger.warning("Website data unavailable; using fallback locale list")
        locales = FALLBACK_LOCALES
    else:
        locales = site_locales(website)

    return [{"params": {"lang": locale}} for locale in locales]


def _unavailable(requested_locale: str | None) -> HomepageLoadResult:
    logger.warning("Website data unavailable. Rendering fallback state.")
    return HomepageLoadResult(
        active_locale=requested_locale or FALLBACK_ACTIVE_LOCALE,
        requested_locale=requested_locale,
    )


def load_homepage(service: CmsService, requested_locale: str | None = None) -> HomepageLoadResult:
    """Load homepage data for a requested locale.

    - No locale requested: redirect to the website's default language.
    - Locale unsupported, or the CMS answered with another locale (the
      localized entry is unpublished): redirect to the fallback locale.
    - Locale valid: load articles and tags and render without redirect.
    - Website unavailable: render the empty fallback state.
    """
    if requested_locale:
        website = service.get_localized_website_data(requested_locale)
    else:
        website = service.get_website_data()

    if website is None:
        return _unavailable(requested_locale)

    supported_locales = site_locales(website)
    result = HomepageLoadResult(
        website_data=website,
        supported_locales=supported_locales,
        active_locale=website.locale,
        requested_locale=requested_locale,
    )

    if not requested_locale:
        default_language = get_default_language(supported_locales, website.default_locale)
        result.redirect = f"/{default_language}"
        return result

    if not is_valid_language(requested_locale, supported_locales) or website.locale != requested_locale:
        fallback_locale = get_default_language(supported_locales, website.default_locale)
        logger.info(f"Locale {requested_locale} not available; redirecting to {fallback_locale}")
        result.redirect = f"/{fallback_locale}"
        return result

    result.articles = service.get_articles(requested_locale)
    result.tags = service.get_tags(requested_locale)
    return result
