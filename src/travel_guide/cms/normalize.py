"""Normalization of raw CMS entities into domain models.

Every normalizer accepts any JSON value, unwraps it with the relation
decoder and returns a schema object, or None (collections: an empty list)
when the input is missing or not an object. Optional fields missing from
the CMS get the defaults documented on the schemas; malformed nested
entries are skipped rather than raised.
"""

import json
import logging
from typing import Any

from schemas import (
    Article,
    Author,
    BrandAssets,
    HomepageHero,
    MediaAsset,
    NavLinkGroup,
    NavMenuItem,
    SeoDefaults,
    Tag,
    ThemePalette,
    ThemePaletteSet,
    Website,
    WebsiteFooter,
    WebsiteHeader,
    WebsiteLocalization,
    WebsiteSystemLabels,
)

from ..fallbacks import first_present, first_truthy
from .unwrap import unwrap_entity, unwrap_relation

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LINK_TYPES = ("internal_route", "external_url")
PALETTE_KEYS = ("primary", "secondary", "accent", "background", "surface", "muted", "neutral")


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _identifier(value: Any) -> int | str | None:
    if isinstance(value, bool):
        return None
    return value if isinstance(value, (int, str)) else None


def _whole_number(value: Any) -> int | None:
    """Integers and integral floats as int; anything else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _entity(value: Any) -> dict | None:
    entity = unwrap_entity(value)
    return entity if isinstance(entity, dict) else None


def _entities(value: Any) -> list[dict]:
    return [entity for entity in unwrap_relation(value) if isinstance(entity, dict)]


def _timestamps(entity: dict) -> dict[str, str | None]:
    return {
        "created_at": _text(entity.get("createdAt")),
        "updated_at": _text(entity.get("updatedAt")),
        "published_at": _text(entity.get("publishedAt")),
    }


def normalize_media(value: Any) -> MediaAsset | None:
    """Normalize a bare, wrapped or list-valued media field.

    Returns None when no url is present after unwrapping. The url is kept
    as stored; see travel_guide.cms.media for absolute resolution.
    """
    candidates = _entities(value)
    if not candidates:
        return None

    media = candidates[0]
    url = _text(media.get("url"))
    if not url:
        return None

    formats = media.get("formats")
    return MediaAsset(
        id=_identifier(media.get("id")),
        url=url,
        alternative_text=_text(first_present(media.get("alternativeText"), media.get("alt"))),
        caption=_text(media.get("caption")),
        width=_whole_number(media.get("width")),
        height=_whole_number(media.get("height")),
        formats=formats if isinstance(formats, dict) else None,
    )


def normalize_locales(value: Any) -> list[str]:
    """Normalize a locale list given as a list, a JSON string or a CSV string.

    Returns:
        Deduplicated, trimmed, non-empty locale codes in first-seen order;
        [] when the value cannot be interpreted.

    Examples:
        >>> normalize_locales('["en", "it"]')
        ['en', 'it']
        >>> normalize_locales("en, pt,en")
        ['en', 'pt']
    """
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                value = json.loads(stripped)
            except ValueError:
                logger.debug(f"Unparseable locale list: {stripped!r}")
                return []
        else:
            value = stripped.split(",")

    if not isinstance(value, list):
        return []

    locales: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        code = item.strip()
        if code and code not in locales:
            locales.append(code)
    return locales


def normalize_nav_item(value: Any) -> NavMenuItem | None:
    item = _entity(value)
    if item is None:
        return None

    link_type = item.get("linkType")
    return NavMenuItem(
        id=_identifier(item.get("id")),
        label=_text(item.get("label")) or "",
        link_type=link_type if link_type in LINK_TYPES else "internal_route",
        path=_text(item.get("path")),
        url=_text(item.get("url")),
        open_in_new_tab=bool(item.get("openInNewTab") or False),
    )


def normalize_nav_items(value: Any) -> list[NavMenuItem]:
    items = (normalize_nav_item(entry) for entry in _entities(value))
    return [item for item in items if item is not None]


def normalize_link_group(value: Any) -> NavLinkGroup | None:
    group = _entity(value)
    if group is None:
        return None

    return NavLinkGroup(
        id=_identifier(group.get("id")),
        group_title=_text(group.get("groupTitle")),
        links=normalize_nav_items(group.get("links")),
    )


def normalize_tag(value: Any) -> Tag | None:
    """Normalize a tag, dropping back-references to websites and articles."""
    tag = _entity(value)
    if tag is None:
        return None

    return Tag(
        id=_identifier(tag.get("id")),
        document_id=_text(tag.get("documentId")),
        name=_text(tag.get("name")) or "",
        slug=_text(tag.get("slug")) or "",
        **_timestamps(tag),
    )


def normalize_tags(value: Any) -> list[Tag]:
    tags = (normalize_tag(entry) for entry in _entities(value))
    return [tag for tag in tags if tag is not None]


def normalize_author(value: Any) -> Author | None:
    author = _entity(value)
    if author is None:
        return None

    return Author(
        id=_identifier(author.get("id")),
        document_id=_text(author.get("documentId")),
        name=_text(author.get("name")) or "",
        slug=_text(author.get("slug")),
        bio=_text(author.get("bio")),
        avatar=normalize_media(author.get("avatar")),
        **_timestamps(author),
    )


def normalize_seo(value: Any) -> SeoDefaults | None:
    seo = _entity(value)
    if seo is None:
        return None

    return SeoDefaults(
        meta_title=_text(seo.get("metaTitle")),
        meta_description=_text(seo.get("metaDescription")),
    )


def normalize_article(value: Any) -> Article | None:
    """Normalize an article including its cover image, tags, author and SEO."""
    article = _entity(value)
    if article is None:
        return None

    return Article(
        id=_identifier(article.get("id")),
        document_id=_text(article.get("documentId")),
        title=_text(article.get("title")) or "",
        slug=_text(article.get("slug")) or "",
        summary=_text(article.get("summary")),
        body=_text(article.get("body")),
        cover_image=normalize_media(article.get("coverImage")),
        reading_time=_whole_number(article.get("readingTime")),
        tags=normalize_tags(article.get("tags")),
        author=normalize_author(article.get("author")),
        seo=normalize_seo(article.get("seo")),
        locale=_text(article.get("locale")) or "",
        **_timestamps(article),
    )


def normalize_articles(value: Any) -> list[Article]:
    articles = (normalize_article(entry) for entry in _entities(value))
    return [article for article in articles if article is not None]


def normalize_authors(value: Any) -> list[Author]:
    authors = (normalize_author(entry) for entry in _entities(value))
    return [author for author in authors if author is not None]


def _normalize_brand(value: Any) -> BrandAssets | None:
    brand = _entity(value)
    if brand is None:
        return None
    return BrandAssets(
        logo=normalize_media(brand.get("logo")),
        favicon=normalize_media(brand.get("favicon")),
    )


def _normalize_theme(value: Any) -> ThemePalette | None:
    theme = _entity(value)
    if theme is None:
        return None

    palette = _entity(theme.get("palette"))
    return ThemePalette(
        brand_color=_text(theme.get("brandColor")),
        palette=(
            ThemePaletteSet(**{key: _text(palette.get(key)) for key in PALETTE_KEYS})
            if palette is not None
            else None
        ),
    )


def _normalize_hero(value: Any) -> HomepageHero | None:
    hero = _entity(value)
    if hero is None:
        return None
    return HomepageHero(
        image=normalize_media(hero.get("image")),
        alt=_text(hero.get("alt")),
    )


def _normalize_header(value: Any) -> WebsiteHeader | None:
    header = _entity(value)
    if header is None:
        return None
    return WebsiteHeader(
        brand_display_name=_text(header.get("brandDisplayName")),
        tagline=_text(header.get("tagline")),
        primary_nav=normalize_nav_items(header.get("primaryNav")),
    )


def _normalize_footer(value: Any) -> WebsiteFooter | None:
    footer = _entity(value)
    if footer is None:
        return None

    groups = (normalize_link_group(entry) for entry in _entities(footer.get("linkGroups")))
    return WebsiteFooter(
        about_text=_text(footer.get("aboutText")),
        link_groups=[group for group in groups if group is not None],
        copyright_text=_text(footer.get("copyrightText")),
    )


def _normalize_system_labels(value: Any) -> WebsiteSystemLabels | None:
    labels = _entity(value)
    if labels is None:
        return None
    return WebsiteSystemLabels(
        search_placeholder=_text(labels.get("searchPlaceholder")),
        read_more_label=_text(labels.get("readMoreLabel")),
        back_to_home_label=_text(labels.get("backToHomeLabel")),
    )


def _normalize_localizations(value: Any) -> list[WebsiteLocalization]:
    return [
        WebsiteLocalization(
            id=_identifier(entry.get("id")),
            document_id=_text(entry.get("documentId")),
            locale=_text(entry.get("locale")) or "",
            name=_text(entry.get("name")),
        )
        for entry in _entities(value)
    ]


def resolve_supported_locales(
    locale: str | None,
    default_locale: str | None,
    supported_locales: Any,
    localizations: list[WebsiteLocalization],
) -> list[str]:
    """Union of all locale sources in precedence order, never empty.

    Order: the entry's own locale, its default locale, the raw supported
    locales, then the locales of its localizations. Falls back to ["en"].
    """
    candidates = [locale, default_locale]
    candidates.extend(normalize_locales(supported_locales))
    candidates.extend(localization.locale for localization in localizations)

    resolved = normalize_locales([code for code in candidates if code])
    return resolved or [DEFAULT_LOCALE]


def normalize_website(value: Any) -> Website | None:
    """Normalize the root website aggregate.

    Nested structures are processed in order: brand, theme, homepage hero,
    header, footer, system labels, articles, tags; then localizations and
    the supported locale union.
    """
    data = _entity(value)
    if data is None:
        return None

    brand = _normalize_brand(data.get("brand"))
    theme = _normalize_theme(data.get("theme"))
    homepage_hero = _normalize_hero(data.get("homepageHero"))
    header = _normalize_header(data.get("header"))
    footer = _normalize_footer(data.get("footer"))
    system_labels = _normalize_system_labels(data.get("systemLabels"))
    articles = normalize_articles(data.get("articles"))
    tags = normalize_tags(data.get("tags"))
    localizations = _normalize_localizations(data.get("localizations"))

    raw_locale = _text(data.get("locale"))
    raw_default_locale = _text(data.get("defaultLocale"))
    # Blank stays blank so get_default_language picks the first supported locale
    default_locale = first_present(raw_default_locale, DEFAULT_LOCALE)

    return Website(
        id=_identifier(data.get("id")),
        document_id=_text(data.get("documentId")),
        api_name=_text(data.get("apiName")) or "",
        name=_text(data.get("name")) or "",
        locale=first_truthy(raw_locale, raw_default_locale, DEFAULT_LOCALE),
        default_locale=default_locale,
        supported_locales=resolve_supported_locales(
            raw_locale,
            raw_default_locale,
            data.get("supportedLocales"),
            localizations,
        ),
        base_url=_text(data.get("baseUrl")),
        brand=brand,
        theme=theme,
        homepage_hero=homepage_hero,
        seo_defaults=normalize_seo(data.get("seoDefaults")),
        header=header,
        footer=footer,
        system_labels=system_labels,
        tags=tags,
        articles=articles,
        localizations=localizations,
        **_timestamps(data),
    )
