"""Localized URL path segments.

Pages are addressed by abstract segment keys ("articles", "tag") that are
spelled differently per locale in public URLs (/it/articoli/...). Forward
lookups fall back to English and then to the key itself, so a segment is
always produced. Reverse lookups only consult the requested locale's table
and are case-sensitive.
"""

import re

URL_SEGMENTS: dict[str, dict[str, str]] = {
    "en": {
        "articles": "articles",
        "tags": "tags",
        "tag": "tag",
        "search": "search",
        "about": "about",
        "contact": "contact",
    },
    "it": {
        "articles": "articoli",
        "tags": "argomenti",
        "tag": "argomento",
        "search": "cerca",
        "about": "chi-siamo",
        "contact": "contatti",
    },
    "es": {
        "articles": "articulos",
        "tags": "etiquetas",
        "tag": "etiqueta",
        "search": "buscar",
        "about": "acerca-de",
        "contact": "contacto",
    },
    "fr": {
        "articles": "articles",
        "tags": "etiquettes",
        "tag": "etiquette",
        "search": "recherche",
        "about": "a-propos",
        "contact": "contact",
    },
    "pt": {
        "articles": "artigos",
        "tags": "tags",
        "tag": "tag",
        "search": "buscar",
        "about": "sobre",
        "contact": "contato",
    },
    "de": {
        "articles": "artikel",
        "tags": "tags",
        "tag": "tag",
        "search": "suche",
        "about": "uber-uns",
        "contact": "kontakt",
    },
}

LOCALE_PREFIX = re.compile(r"^/[^/]+/")


def get_localized_segment(lang: str, key: str) -> str:
    """Public spelling of a segment key in a language.

    Examples:
        >>> get_localized_segment("it", "articles")
        'articoli'
        >>> get_localized_segment("zz", "articles")
        'articles'
    """
    return (
        URL_SEGMENTS.get(lang, {}).get(key)
        or URL_SEGMENTS["en"].get(key)
        or key
    )


def get_segment_key(lang: str, localized_value: str) -> str | None:
    """Segment key whose spelling in lang is exactly localized_value."""
    segments = URL_SEGMENTS.get(lang)
    if not segments:
        return None

    for key, value in segments.items():
        if value == localized_value:
            return key
    return None


def build_localized_url(
    lang: str,
    segments: list[str],
    params: dict[str, str] | None = None,
) -> str:
    """Build a locale-prefixed path from segment keys.

    Segments starting with ":" are replaced verbatim by the matching
    parameter when one is given; all other segments (including unmatched
    placeholders) go through get_localized_segment.

    Examples:
        >>> build_localized_url("it", ["articles", ":slug"], {"slug": "lisbona"})
        '/it/articoli/lisbona'
        >>> build_localized_url("en", [])
        '/en/'
    """
    params = params or {}
    localized: list[str] = []
    for segment in segments:
        if segment.startswith(":") and params.get(segment[1:]):
            localized.append(params[segment[1:]])
        else:
            localized.append(get_localized_segment(lang, segment))

    return f"/{lang}/" + "/".join(localized)


def parse_localized_url(lang: str, path: str) -> list[str]:
    """Resolve a localized path back into segment keys.

    The first path segment is taken as the locale marker and dropped.
    Segments without a key in lang (slugs, ids) are kept literally.
    """
    remainder = LOCALE_PREFIX.sub("", path, count=1)
    segments = [segment for segment in remainder.split("/") if segment]
    return [get_segment_key(lang, segment) or segment for segment in segments]
