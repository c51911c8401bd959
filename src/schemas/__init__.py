"""Schema definitions for the travel guide site."""

from .build import BuildFile, BuildReport
from .cms_entity import CmsEntity
from .content import Article, Author, SeoDefaults, Tag
from .media import MediaAsset
from .website import (
    BrandAssets,
    HomepageHero,
    NavLinkGroup,
    NavMenuItem,
    ThemePalette,
    ThemePaletteSet,
    Website,
    WebsiteFooter,
    WebsiteHeader,
    WebsiteLocalization,
    WebsiteSystemLabels,
)

__all__ = [
    "Article",
    "Author",
    "BrandAssets",
    "BuildFile",
    "BuildReport",
    "CmsEntity",
    "HomepageHero",
    "MediaAsset",
    "NavLinkGroup",
    "NavMenuItem",
    "SeoDefaults",
    "Tag",
    "ThemePalette",
    "ThemePaletteSet",
    "Website",
    "WebsiteFooter",
    "WebsiteHeader",
    "WebsiteLocalization",
    "WebsiteSystemLabels",
]
