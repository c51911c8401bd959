"""Absolute URL resolution for CMS media.

Media urls are stored relative to the CMS host and resolved here at render
time, so the rule is applied exactly once wherever an asset is shown.
"""

import logging

from schemas import MediaAsset

logger = logging.getLogger(__name__)


def resolve_media_url(path: str | None, cms_url: str | None) -> str | None:
    """Resolve a stored media path against the CMS base URL.

    Args:
        path: Stored media url (relative path or absolute URL)
        cms_url: Configured CMS base URL, may be None

    Returns:
        None for an empty path, the path unchanged when it is already
        absolute or no base URL is configured, else base + path.

    Examples:
        >>> resolve_media_url("/uploads/a.jpg", "https://cms.example/")
        'https://cms.example/uploads/a.jpg'
        >>> resolve_media_url("https://x/y.jpg", "https://cms.example")
        'https://x/y.jpg'
    """
    if not path:
        return None

    if path.startswith("http"):
        return path

    base_url = (cms_url or "").rstrip("/")
    if not base_url:
        logger.warning(f"CMS_URL is not configured; leaving media path {path} relative")
        return path

    return f"{base_url}{path}"


def get_media_asset_url(asset: MediaAsset | None, cms_url: str | None) -> str | None:
    """Absolute URL of a media asset, or None when there is no asset."""
    if asset is None:
        return None
    return resolve_media_url(asset.url, cms_url)
