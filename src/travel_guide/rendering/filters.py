"""Jinja2 filters for the page templates."""

import re
from datetime import datetime

from markdown_it import MarkdownIt

from schemas import MediaAsset

from ..cms.media import get_media_asset_url, resolve_media_url

_md = MarkdownIt("commonmark", {"html": True})

HTML_TAG = re.compile(r"<[^>]*>")

MONTH_NAMES = {
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
    "fr": ["janvier", "février", "mars", "avril", "mai", "juin", "juillet",
           "août", "septembre", "octobre", "novembre", "décembre"],
    "it": ["gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno", "luglio",
           "agosto", "settembre", "ottobre", "novembre", "dicembre"],
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "pt": ["janeiro", "fevereiro", "março", "abril", "maio", "junho", "julho",
           "agosto", "setembro", "outubro", "novembro", "dezembro"],
    "de": ["Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
           "August", "September", "Oktober", "November", "Dezember"],
}


def format_date(date_string: str | None, locale: str = "en") -> str:
    """Format a CMS ISO timestamp as a long, human-readable date.

    Args:
        date_string: ISO 8601 timestamp such as "2023-01-15T10:30:00.000Z"
        locale: Language code selecting month names and order

    Returns:
        "January 15, 2023" in English, "15 gennaio 2023" style elsewhere;
        the input unchanged when it cannot be parsed

    Examples:
        >>> format_date("2023-01-15T10:30:00.000Z")
        'January 15, 2023'
        >>> format_date("2023-01-15T10:30:00.000Z", "it")
        '15 gennaio 2023'
    """
    if not date_string:
        return ""
    try:
        dt = datetime.fromisoformat(date_string.replace("Z", "+00:00"))
    except ValueError:
        return date_string

    if locale not in MONTH_NAMES or locale == "en":
        return f"{MONTH_NAMES['en'][dt.month - 1]} {dt.day}, {dt.year}"
    return f"{dt.day} {MONTH_NAMES[locale][dt.month - 1]} {dt.year}"


def tag_names(tags: list | None) -> list[str]:
    """Extract tag names from tag objects or dicts.

    Examples:
        >>> tag_names([{"name": "Travel"}, {"name": ""}])
        ['Travel']
    """
    if not tags:
        return []
    names = []
    for tag in tags:
        if isinstance(tag, dict):
            name = tag.get("name", "")
        else:
            name = getattr(tag, "name", "")
        if name:
            names.append(name)
    return names


def clean_content(html: str | None) -> str:
    """Remove scripts, iframes and noscript blocks from CMS HTML.

    Examples:
        >>> clean_content('<p>Hello</p><script>alert("x")</script>')
        '<p>Hello</p>'
    """
    if not html:
        return ""

    html = re.sub(r"<script[^>]*>.*?</script>", "", html, flags=re.DOTALL | re.IGNORECASE)
    html = re.sub(r"<iframe[^>]*>.*?</iframe>", "", html, flags=re.DOTALL | re.IGNORECASE)
    html = re.sub(r"<iframe[^>]*/?>", "", html, flags=re.IGNORECASE)
    html = re.sub(r"<noscript[^>]*>.*?</noscript>", "", html, flags=re.DOTALL | re.IGNORECASE)

    return html.strip()


def render_markdown(body: str | None) -> str:
    """Article body as HTML.

    Bodies that already contain HTML tags are sanitized and kept; anything
    else is treated as Markdown.
    """
    if not body or not body.strip():
        return ""
    if HTML_TAG.search(body):
        return clean_content(body)
    return clean_content(_md.render(body))


def make_media_url_filter(cms_url: str | None):
    """Build a media_url filter bound to the CMS base URL.

    The filter accepts a MediaAsset or a stored path and returns the
    absolute URL, or the given default when there is nothing to show.
    """

    def media_url(value, default: str | None = None) -> str | None:
        if isinstance(value, MediaAsset):
            url = get_media_asset_url(value, cms_url)
        else:
            url = resolve_media_url(value, cms_url)
        return url if url is not None else default

    return media_url


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "tag_names": tag_names,
    "clean_content": clean_content,
    "render_markdown": render_markdown,
}
