"""Language metadata and locale selection."""

from dataclasses import dataclass

from ..fallbacks import first_truthy

FALLBACK_LANGUAGE = "en"
GLOBE_FLAG = "\N{GLOBE WITH MERIDIANS}"


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    name: str
    flag: str


LANGUAGES: dict[str, LanguageInfo] = {
    "en": LanguageInfo("en", "English", "\U0001F1EC\U0001F1E7"),
    "fr": LanguageInfo("fr", "Français", "\U0001F1EB\U0001F1F7"),
    "it": LanguageInfo("it", "Italiano", "\U0001F1EE\U0001F1F9"),
    "es": LanguageInfo("es", "Español", "\U0001F1EA\U0001F1F8"),
    "pt": LanguageInfo("pt", "Português", "\U0001F1F5\U0001F1F9"),
    "de": LanguageInfo("de", "Deutsch", "\U0001F1E9\U0001F1EA"),
}


def get_language_info(code: str) -> LanguageInfo:
    """Display name and flag for a language code.

    Unknown codes degrade to the upper-cased code with a globe flag.

    Examples:
        >>> get_language_info("it").name
        'Italiano'
        >>> get_language_info("nl").name
        'NL'
    """
    info = LANGUAGES.get(code)
    if info is not None:
        return info
    return LanguageInfo(code, code.upper(), GLOBE_FLAG)


def is_valid_language(code: str, available_locales: list[str]) -> bool:
    return code in available_locales


def get_default_language(available_locales: list[str], default_locale: str | None) -> str:
    """Pick the locale a site falls back to.

    Precedence: the configured default locale, then the first available
    locale, then "en".
    """
    first_available = available_locales[0] if available_locales else None
    return first_truthy(default_locale, first_available, FALLBACK_LANGUAGE)


def get_current_language_from_url(path: str) -> str | None:
    """First non-empty path segment, or None for the root path."""
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else None
