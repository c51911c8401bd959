"""Derived display values for page templates.

Each value comes from an ordered chain of sources ending in a literal
default. The chains are spelled out here once so templates stay free of
fallback logic.
"""

from dataclasses import dataclass

from schemas import NavMenuItem, Tag, Website

from ..fallbacks import first_present
from ..i18n import build_localized_url

DEFAULT_BRAND_NAME = "Multisite Travel"
DEFAULT_READ_MORE = "Read more"
DEFAULT_SEARCH_PLACEHOLDER = "Search articles…"
DEFAULT_BACK_TO_HOME = "Back to home"
WORDS_PER_MINUTE = 200
TAG_NAV_LIMIT = 5


@dataclass(frozen=True)
class ThemeColors:
    brand: str = "#FF8A00"
    secondary: str = "#0EA5B5"
    background: str = "#FFFFFF"
    surface: str = "#F6F7F9"
    text: str = "#111827"
    muted: str = "#6b7280"


@dataclass(frozen=True)
class SystemLabels:
    read_more: str = DEFAULT_READ_MORE
    search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER
    back_to_home: str = DEFAULT_BACK_TO_HOME


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str
    open_in_new_tab: bool = False


def theme_colors(website: Website | None) -> ThemeColors:
    """Page colors: theme values where present, defaults elsewhere.

    The brand color prefers the theme's brandColor over palette.primary.
    """
    defaults = ThemeColors()
    theme = website.theme if website else None
    palette = theme.palette if theme else None

    def pick(name: str) -> str | None:
        return getattr(palette, name) if palette else None

    return ThemeColors(
        brand=first_present(theme.brand_color if theme else None, pick("primary"), defaults.brand),
        secondary=first_present(pick("secondary"), defaults.secondary),
        background=first_present(pick("background"), defaults.background),
        surface=first_present(pick("surface"), defaults.surface),
        text=first_present(pick("neutral"), defaults.text),
        muted=first_present(pick("muted"), defaults.muted),
    )


def brand_styles(website: Website | None) -> str:
    """CSS custom properties for the colors the theme actually defines.

    Returns an empty string when the website has no theme, so the
    stylesheet defaults apply.
    """
    theme = website.theme if website else None
    if theme is None:
        return ""

    palette = theme.palette
    values = {
        "--brand-primary": first_present(theme.brand_color, palette.primary if palette else None),
        "--brand-secondary": palette.secondary if palette else None,
        "--brand-accent": palette.accent if palette else None,
        "--brand-background": palette.background if palette else None,
        "--brand-surface": palette.surface if palette else None,
        "--brand-muted": palette.muted if palette else None,
        "--brand-neutral": palette.neutral if palette else None,
    }
    return "; ".join(f"{name}: {value}" for name, value in values.items() if value)


def brand_display_name(website: Website | None) -> str:
    header = website.header if website else None
    return first_present(
        header.brand_display_name if header else None,
        website.name if website else None,
        DEFAULT_BRAND_NAME,
    )


def tagline(website: Website | None) -> str:
    header = website.header if website else None
    seo = website.seo_defaults if website else None
    return first_present(
        header.tagline if header else None,
        seo.meta_description if seo else None,
        "",
    )


def seo_title(website: Website | None) -> str:
    seo = website.seo_defaults if website else None
    return first_present(seo.meta_title if seo else None, brand_display_name(website))


def seo_description(website: Website | None) -> str:
    seo = website.seo_defaults if website else None
    return first_present(seo.meta_description if seo else None, tagline(website))


def system_labels(website: Website | None) -> SystemLabels:
    labels = website.system_labels if website else None
    if labels is None:
        return SystemLabels()
    return SystemLabels(
        read_more=first_present(labels.read_more_label, DEFAULT_READ_MORE),
        search_placeholder=first_present(labels.search_placeholder, DEFAULT_SEARCH_PLACEHOLDER),
        back_to_home=first_present(labels.back_to_home_label, DEFAULT_BACK_TO_HOME),
    )


def resolve_nav_href(item: NavMenuItem, locale: str) -> str:
    """href of a navigation item.

    External links use their url (or "#"); internal routes are prefixed
    with the locale and lose any trailing slash.
    """
    if item.link_type == "external_url":
        return item.url or "#"

    path = item.path or ""
    if path and not path.startswith("/"):
        path = f"/{path}"
    return f"/{locale}{path}".rstrip("/") or f"/{locale}"


def build_nav_links(website: Website | None, tags: list[Tag], locale: str) -> list[NavLink]:
    """Primary navigation, or links to the first tags when none is defined."""
    primary_nav = website.header.primary_nav if website and website.header else []

    if primary_nav:
        return [
            NavLink(
                label=item.label,
                href=resolve_nav_href(item, locale),
                open_in_new_tab=item.open_in_new_tab or item.link_type == "external_url",
            )
            for item in primary_nav
        ]

    return [
        NavLink(
            label=tag.name,
            href=build_localized_url(locale, ["tag", ":slug"], {"slug": tag.slug}),
        )
        for tag in tags[:TAG_NAV_LIMIT]
    ]


def compute_reading_time(body: str | None) -> int | None:
    """Estimated minutes to read a body at 200 words per minute, at least 1."""
    if not body or not body.strip():
        return None
    words = len(body.split())
    # Halves round up
    return max(1, int(words / WORDS_PER_MINUTE + 0.5))
