"""Editorial content schemas: tags, authors and articles."""

from pydantic import Field

from .cms_entity import CmsEntity
from .media import MediaAsset


class SeoDefaults(CmsEntity):
    """Meta title and description for a page or a whole website."""

    meta_title: str | None = None
    meta_description: str | None = None


class Tag(CmsEntity):
    """A topic label attached to articles.

    document_id is stable across locales while id is per locale.
    """

    id: int | str | None = None
    document_id: str | None = None
    name: str = ""
    slug: str = ""

    # Timestamps are kept as the ISO strings the CMS returns
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None


class Author(CmsEntity):
    """A content author."""

    id: int | str | None = None
    document_id: str | None = None
    name: str = ""
    slug: str | None = None
    bio: str | None = None
    avatar: MediaAsset | None = None
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None


class Article(CmsEntity):
    """A localized travel article.

    Attributes:
        id: Per-locale CMS identifier
        document_id: Locale-stable CMS identifier
        title: Article headline
        slug: URL slug, unique within a website and locale
        summary: Short teaser text
        body: Markdown or HTML body
        cover_image: Optional cover media
        reading_time: Whole minutes, when provided by the CMS
        tags: Tags attached to the article
        author: Optional author
        seo: Optional per-article SEO overrides
        locale: Locale code of this variant
    """

    id: int | str | None = None
    document_id: str | None = None
    title: str = ""
    slug: str = ""
    summary: str | None = None
    body: str | None = None
    cover_image: MediaAsset | None = None
    reading_time: int | None = None
    tags: list[Tag] = Field(default_factory=list)
    author: Author | None = None
    seo: SeoDefaults | None = None
    locale: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None

    @property
    def last_modified(self) -> str | None:
        """Most relevant modification timestamp for sitemaps and listings."""
        return self.updated_at or self.published_at or self.created_at
