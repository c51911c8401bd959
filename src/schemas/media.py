"""Media asset schema."""

from typing import Any

from .cms_entity import CmsEntity


class MediaAsset(CmsEntity):
    """An uploaded file (image, icon) referenced by CMS content.

    The url is stored exactly as the CMS returns it, usually a path relative
    to the CMS host. The absolute form is derived at render time by
    travel_guide.cms.media.resolve_media_url.

    Attributes:
        id: CMS identifier of the upload
        url: Relative or absolute path of the file
        alternative_text: Alt text for images
        caption: Optional caption
        width: Pixel width, when known
        height: Pixel height, when known
        formats: Responsive variants keyed by format name
    """

    id: int | str | None = None
    url: str
    alternative_text: str | None = None
    caption: str | None = None
    width: int | None = None
    height: int | None = None
    formats: dict[str, Any] | None = None
