"""CMS normalization engine: relation decoding, normalizers and service."""

from .media import get_media_asset_url, resolve_media_url
from .normalize import (
    normalize_article,
    normalize_author,
    normalize_locales,
    normalize_media,
    normalize_tag,
    normalize_website,
)
from .service import CmsService, FetchResult
from .unwrap import unwrap_entity, unwrap_relation

__all__ = [
    "CmsService",
    "FetchResult",
    "get_media_asset_url",
    "normalize_article",
    "normalize_author",
    "normalize_locales",
    "normalize_media",
    "normalize_tag",
    "normalize_website",
    "resolve_media_url",
    "unwrap_entity",
    "unwrap_relation",
]
