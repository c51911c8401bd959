"""CMS service: fetch, normalize and sort site content.

The public operations never raise. Configuration, transport, decode and
data-shape failures are caught at each operation boundary, logged with the
operation name and locale, and turned into the empty sentinel: None for
single lookups, [] for collections. Internally every load produces a
FetchResult so callers inside the package can still tell an empty result
from a failed one.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from schemas import Article, Author, Tag, Website

from ..clients import (
    ClientError,
    CmsClient,
    ConfigurationError,
    HttpRequestRecord,
    RequestTracker,
    ValidationError,
    default_tracker,
)
from ..config import SiteConfig
from .normalize import normalize_article, normalize_author, normalize_tag, normalize_website

logger = logging.getLogger(__name__)

T = TypeVar("T")
N = TypeVar("N")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one CMS load: a value, plus the error when it failed.

    value always holds the sentinel the public API returns on failure, so
    callers that do not care about the cause can use it directly.
    """

    value: T
    error: ClientError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CmsService:
    """High-level access to website, article, tag and author content.

    Example:
        config = SiteConfig.from_env()
        with CmsService(config) as cms:
            website = cms.get_localized_website_data("it")
            articles = cms.get_articles("it")
    """

    def __init__(
        self,
        config: SiteConfig,
        tracker: RequestTracker | None = None,
    ):
        self.config = config
        self.tracker = tracker if tracker is not None else default_tracker
        self._client: CmsClient | None = None

    @property
    def client(self) -> CmsClient:
        """Lazy-initialized CMS client.

        Raises:
            ConfigurationError: If no CMS URL is configured
        """
        if not self.config.cms_url:
            raise ConfigurationError("CMS_URL is not configured")
        if self._client is None:
            self._client = CmsClient(
                self.config.client_config(),
                website_api_name=self.config.website_api_name,
                tracker=self.tracker if self.config.is_development else None,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _load(
        self,
        resource: str,
        normalizer: Callable[[Any], N | None],
        locale: str | None = None,
        slug: str | None = None,
    ) -> FetchResult[list[N]]:
        """Fetch a collection and normalize each entity, dropping unusable ones."""
        try:
            raw_entities = self.client.fetch(resource, locale=locale, slug=slug)
            normalized = [normalizer(entity) for entity in raw_entities]
        except ClientError as e:
            return FetchResult([], error=e)
        except PydanticValidationError as e:
            error = ValidationError(
                f"Unexpected {resource} data shape",
                errors=[str(err) for err in e.errors()],
            )
            return FetchResult([], error=error)

        return FetchResult([item for item in normalized if item is not None])

    def _log_failure(self, operation: str, error: ClientError, locale: str | None = None) -> None:
        context = f" (locale={locale})" if locale else ""
        logger.error(f"{operation} failed{context}: {error.message}")

    def fetch_website(self, locale: str | None = None) -> FetchResult[Website | None]:
        """Load the configured website, keeping the failure cause."""
        result = self._load("websites", normalize_website, locale=locale)
        if not result.ok:
            return FetchResult(None, error=result.error)
        return FetchResult(result.value[0] if result.value else None)

    def get_website_data(self, locale: str | None = None) -> Website | None:
        """Fetch and normalize the website entry.

        Args:
            locale: Locale to request; None requests the CMS default

        Returns:
            The Website, or None when the CMS is unreachable, answers with an
            error or invalid JSON, is not configured, or has no such website
        """
        result = self.fetch_website(locale)
        if not result.ok:
            self._log_failure("Fetching website data", result.error, locale)
        elif result.value is None:
            logger.warning(f"No website found for apiName {self.config.website_api_name!r} (locale={locale})")
        return result.value

    def get_localized_website_data(self, locale: str) -> Website | None:
        """Fetch the website in a locale, falling back once to the default.

        When the locale is not published the unlocalized entry is returned
        instead; its locale field then differs from the requested one.
        """
        website = self.get_website_data(locale)
        if website is not None or not locale:
            return website

        logger.info(f"Website not available in locale {locale}; falling back to default locale")
        return self.get_website_data()

    def get_articles(self, locale: str | None = None) -> list[Article]:
        """Articles of the configured website, most recently updated first."""
        result = self._load("articles", normalize_article, locale=locale)
        if not result.ok:
            self._log_failure("Fetching articles", result.error, locale)
            return []
        return sorted(result.value, key=lambda article: article.updated_at or "", reverse=True)

    def get_tags(self, locale: str | None = None) -> list[Tag]:
        """Tags of the configured website, by name ascending (case-insensitive)."""
        result = self._load("tags", normalize_tag, locale=locale)
        if not result.ok:
            self._log_failure("Fetching tags", result.error, locale)
            return []
        return sorted(result.value, key=lambda tag: (tag.name.casefold(), tag.name))

    def get_article_by_slug(self, slug: str, locale: str | None = None) -> Article | None:
        """The article with exactly this slug in a locale, or None."""
        result = self._load("articles", normalize_article, locale=locale, slug=slug)
        if not result.ok:
            self._log_failure(f"Fetching article {slug!r}", result.error, locale)
            return None

        for article in result.value:
            if article.slug == slug:
                return article
        return None

    def get_authors(self) -> list[Author]:
        """All authors, by name ascending (case-insensitive)."""
        result = self._load("authors", normalize_author)
        if not result.ok:
            self._log_failure("Fetching authors", result.error)
            return []
        return sorted(result.value, key=lambda author: (author.name.casefold(), author.name))

    def get_http_requests(self) -> list[HttpRequestRecord]:
        """Live request-tracker buffer, most recent first (development only)."""
        return self.tracker.requests
