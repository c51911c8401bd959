"""robots.txt and XML sitemaps.

The public base URL is taken from the CMS website entry when it provides
one, else from the configured site URL, else from the host of the current
request.
"""

import logging
from datetime import datetime, timezone

from lxml import etree

from schemas import Article, Tag, Website

from ..cms import CmsService
from ..fallbacks import first_truthy
from ..i18n import build_localized_url
from .homepage import site_locales

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_SITEMAP_LOCALES = ["en"]

ROBOTS_TEMPLATE = """User-agent: *
Allow: /

# Sitemaps
Sitemap: {base_url}/sitemap-index.xml

# Block paths that don't need indexing
Disallow: /api/
Disallow: /admin/
Disallow: /debug/

# Allow image crawling
User-agent: Googlebot-Image
Allow: /

User-agent: Googlebot
Allow: /

User-agent: Bingbot
Allow: /

User-agent: facebookexternalhit
Allow: /

User-agent: Twitterbot
Allow: /

# Crawl-delay for aggressive bots
User-agent: *
Crawl-delay: 1
"""

FALLBACK_ROBOTS_TEMPLATE = """User-agent: *
Allow: /

# Fallback sitemap (website data unavailable)
Sitemap: {base_url}/sitemap-index.xml

Disallow: /api/
Disallow: /admin/
Disallow: /debug/
"""


def resolve_base_url(
    website: Website | None,
    site_url: str | None = None,
    request_url: str | None = None,
) -> str:
    """Public base URL without a trailing slash."""
    base_url = first_truthy(
        website.base_url if website else None,
        site_url,
        request_url,
        "",
    )
    return base_url.rstrip("/")


def render_robots_txt(base_url: str, fallback: bool = False) -> str:
    template = FALLBACK_ROBOTS_TEMPLATE if fallback else ROBOTS_TEMPLATE
    return template.format(base_url=base_url.rstrip("/"))


def load_robots_txt(
    service: CmsService,
    site_url: str | None = None,
    request_url: str | None = None,
) -> str:
    """robots.txt body; the short fallback body when the website is unavailable."""
    website = service.get_website_data()
    base_url = resolve_base_url(website, site_url, request_url)
    return render_robots_txt(base_url, fallback=website is None)


def _sub(parent: etree._Element, tag: str, text: str) -> etree._Element:
    element = etree.SubElement(parent, f"{{{SITEMAP_NS}}}{tag}")
    element.text = text
    return element


def _tostring(root: etree._Element) -> bytes:
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def render_sitemap_index(base_url: str, locales: list[str], now: datetime | None = None) -> bytes:
    """Sitemap index with one sitemap-{locale}.xml entry per locale."""
    lastmod = (now or datetime.now(timezone.utc)).isoformat()
    base_url = base_url.rstrip("/")

    root = etree.Element(f"{{{SITEMAP_NS}}}sitemapindex", nsmap={None: SITEMAP_NS})
    for locale in locales:
        sitemap = etree.SubElement(root, f"{{{SITEMAP_NS}}}sitemap")
        _sub(sitemap, "loc", f"{base_url}/sitemap-{locale}.xml")
        _sub(sitemap, "lastmod", lastmod)
    return _tostring(root)


def _add_url(
    root: etree._Element,
    loc: str,
    lastmod: str,
    changefreq: str,
    priority: str,
) -> None:
    url = etree.SubElement(root, f"{{{SITEMAP_NS}}}url")
    _sub(url, "loc", loc)
    _sub(url, "lastmod", lastmod)
    _sub(url, "changefreq", changefreq)
    _sub(url, "priority", priority)


def render_locale_sitemap(
    base_url: str,
    locale: str,
    articles: list[Article],
    tags: list[Tag],
    now: datetime | None = None,
) -> bytes:
    """URL set for one locale.

    Contains the homepage, the articles index (when there are articles),
    every article with its last modification date, and every tag page.
    """
    current = (now or datetime.now(timezone.utc)).isoformat()
    base_url = base_url.rstrip("/")

    root = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
    _add_url(root, f"{base_url}/{locale}/", current, "daily", "1.0")

    if articles:
        index_path = build_localized_url(locale, ["articles"])
        _add_url(root, f"{base_url}{index_path}/", current, "daily", "0.8")

    for article in articles:
        path = build_localized_url(locale, ["articles", ":slug"], {"slug": article.slug})
        _add_url(root, f"{base_url}{path}", article.last_modified or current, "weekly", "0.7")

    for tag in tags:
        path = build_localized_url(locale, ["tag", ":slug"], {"slug": tag.slug})
        _add_url(root, f"{base_url}{path}", current, "weekly", "0.5")

    return _tostring(root)


def load_sitemap_index(
    service: CmsService,
    site_url: str | None = None,
    request_url: str | None = None,
    now: datetime | None = None,
) -> bytes:
    website = service.get_website_data()
    locales = site_locales(website) if website else DEFAULT_SITEMAP_LOCALES
    return render_sitemap_index(resolve_base_url(website, site_url, request_url), locales, now)


def load_locale_sitemap(
    service: CmsService,
    locale: str,
    site_url: str | None = None,
    request_url: str | None = None,
    now: datetime | None = None,
) -> bytes | None:
    """Sitemap for a locale, or None (a 404) when the locale is unsupported."""
    website = service.get_website_data()
    locales = site_locales(website) if website else DEFAULT_SITEMAP_LOCALES
    if locale not in locales:
        logger.info(f"No sitemap for unsupported locale {locale}")
        return None

    return render_locale_sitemap(
        resolve_base_url(website, site_url, request_url),
        locale,
        service.get_articles(locale),
        service.get_tags(locale),
        now,
    )
