"""Locale resolution and URL localization."""

from .language import (
    LANGUAGES,
    LanguageInfo,
    get_current_language_from_url,
    get_default_language,
    get_language_info,
    is_valid_language,
)
from .url_segments import (
    URL_SEGMENTS,
    build_localized_url,
    get_localized_segment,
    get_segment_key,
    parse_localized_url,
)

__all__ = [
    "LANGUAGES",
    "URL_SEGMENTS",
    "LanguageInfo",
    "build_localized_url",
    "get_current_language_from_url",
    "get_default_language",
    "get_language_info",
    "get_localized_segment",
    "get_segment_key",
    "is_valid_language",
    "parse_localized_url",
]
