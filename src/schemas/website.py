"""Website aggregate schemas.

A Website is the root of everything a page renders: brand assets, theme,
navigation, footer, labels and the locales the site is published in. One
Website instance represents one CMS website entry in one locale; the same
document_id recurs across locales with a different id and locale.
"""

from typing import Literal

from pydantic import Field

from .cms_entity import CmsEntity
from .content import Article, SeoDefaults, Tag
from .media import MediaAsset


class ThemePaletteSet(CmsEntity):
    """Named colors of a theme. Every color is optional."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    background: str | None = None
    surface: str | None = None
    muted: str | None = None
    neutral: str | None = None


class ThemePalette(CmsEntity):
    brand_color: str | None = None
    palette: ThemePaletteSet | None = None


class BrandAssets(CmsEntity):
    logo: MediaAsset | None = None
    favicon: MediaAsset | None = None


class HomepageHero(CmsEntity):
    image: MediaAsset | None = None
    alt: str | None = None


class NavMenuItem(CmsEntity):
    """A navigation entry.

    External links use url as the href; internal routes combine path with
    the active locale.
    """

    id: int | str | None = None
    label: str = ""
    link_type: Literal["internal_route", "external_url"] = "internal_route"
    path: str | None = None
    url: str | None = None
    open_in_new_tab: bool = False


class NavLinkGroup(CmsEntity):
    id: int | str | None = None
    group_title: str | None = None
    links: list[NavMenuItem] = Field(default_factory=list)


class WebsiteHeader(CmsEntity):
    brand_display_name: str | None = None
    tagline: str | None = None
    primary_nav: list[NavMenuItem] = Field(default_factory=list)


class WebsiteFooter(CmsEntity):
    about_text: str | None = None
    link_groups: list[NavLinkGroup] = Field(default_factory=list)
    copyright_text: str | None = None


class WebsiteSystemLabels(CmsEntity):
    search_placeholder: str | None = None
    read_more_label: str | None = None
    back_to_home_label: str | None = None


class WebsiteLocalization(CmsEntity):
    """Summary of another locale variant of the same website."""

    id: int | str | None = None
    document_id: str | None = None
    locale: str = ""
    name: str | None = None


class Website(CmsEntity):
    """Root aggregate for one website in one locale.

    supported_locales is never empty once normalized: it is the ordered,
    deduplicated union of locale, default_locale, the raw supported locales
    and the locales of all localizations, or ["en"] when all are empty.
    """

    id: int | str | None = None
    document_id: str | None = None
    api_name: str = ""
    name: str = ""
    locale: str = "en"
    default_locale: str = "en"
    supported_locales: list[str] = Field(default_factory=lambda: ["en"])
    base_url: str | None = None
    brand: BrandAssets | None = None
    theme: ThemePalette | None = None
    homepage_hero: HomepageHero | None = None
    seo_defaults: SeoDefaults | None = None
    header: WebsiteHeader | None = None
    footer: WebsiteFooter | None = None
    system_labels: WebsiteSystemLabels | None = None
    tags: list[Tag] = Field(default_factory=list)
    articles: list[Article] = Field(default_factory=list)
    localizations: list[WebsiteLocalization] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None
