"""REST client for the headless CMS that backs the travel guide."""

import logging
from typing import Any

from .client import Client
from .exceptions import ConfigurationError, ValidationError
from .tracker import RequestTracker

logger = logging.getLogger(__name__)


class CmsClient(Client):
    """Client for the CMS collection endpoints.

    Builds the filter, population, sort and pagination query parameters for
    each resource and returns the raw entities from the response `data`
    member. Entities are returned exactly as the CMS sends them; flattening
    relation wrappers is the job of travel_guide.cms.normalize.

    Example:
        config = {"base_url": "https://cms.example.com"}
        with CmsClient(config, website_api_name="portugal") as client:
            raw_articles = client.fetch("articles", locale="en")
    """

    API_PREFIX = "/api"
    DEFAULT_PAGE_SIZE = 100
    RESOURCES = ("websites", "articles", "tags", "authors")

    # Relations populated one level deep on the website entry
    WEBSITE_RELATIONS = (
        "brand",
        "theme",
        "homepageHero",
        "header",
        "seoDefaults",
        "systemLabels",
        "articles",
        "tags",
        "localizations",
    )
    ARTICLE_RELATIONS = ("coverImage", "tags", "author", "seo")

    def __init__(
        self,
        config: dict,
        website_api_name: str | None = None,
        tracker: RequestTracker | None = None,
    ):
        super().__init__(config, tracker=tracker)
        self.website_api_name = website_api_name

    def fetch(
        self,
        resource: str,
        locale: str | None = None,
        slug: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch the raw entities of a collection endpoint.

        Args:
            resource: One of "websites", "articles", "tags", "authors"
            locale: Optional locale code to request
            slug: Exact slug filter (articles only)

        Returns:
            List of raw entity dicts (possibly relation-wrapped)

        Raises:
            ValueError: If the resource is unknown
            ConfigurationError: If the website apiName is needed but unset
            ValidationError: If the response document has no usable data
            ConnectionError, APIError, DecodeError: On transport failures
        """
        if resource not in self.RESOURCES:
            raise ValueError(f"Unknown CMS resource: {resource}")

        params = self._build_params(resource, locale=locale, slug=slug)
        document = self.get_json(f"{self.API_PREFIX}/{resource}", params=params)
        return self._extract_data(document)

    def _require_api_name(self) -> str:
        if not self.website_api_name:
            raise ConfigurationError("WEBSITE_API_NAME is not configured")
        return self.website_api_name

    def _build_params(
        self,
        resource: str,
        locale: str | None = None,
        slug: str | None = None,
    ) -> dict[str, Any]:
        """Build query parameters for a collection request.

        The CMS uses:
        - filters[field][$eq]: exact-match filters, nested for relations
        - populate: flat list or nested populate[relation][populate] directives
        - sort: field:direction
        - pagination[page], pagination[pageSize]: a single page is requested
        """
        if resource == "websites":
            params = {"filters[apiName][$eq]": self._require_api_name()}
            params.update(self._website_populate())
        elif resource == "authors":
            params = {"populate": "avatar", "sort": "name:asc"}
            params.update(self._pagination())
        else:
            params = {"filters[website][apiName][$eq]": self._require_api_name()}
            if resource == "articles":
                params["populate"] = ",".join(self.ARTICLE_RELATIONS)
                params["sort"] = "updatedAt:desc"
                if slug is not None:
                    params["filters[slug][$eq]"] = slug
            else:
                params["populate"] = "*"
                params["sort"] = "name:asc"
            params.update(self._pagination())

        if locale:
            params["locale"] = locale
        return params

    def _website_populate(self) -> dict[str, str]:
        params = {
            f"populate[{relation}][populate]": "*"
            for relation in self.WEBSITE_RELATIONS
        }
        # Footer link groups carry their own nested links
        params["populate[footer][populate][linkGroups][populate]"] = "*"
        return params

    def _pagination(self) -> dict[str, int]:
        return {
            "pagination[page]": 1,
            "pagination[pageSize]": self.DEFAULT_PAGE_SIZE,
        }

    def _extract_data(self, document: Any) -> list[dict[str, Any]]:
        """Return the entity list from a `{data, meta}` response document."""
        if not isinstance(document, dict):
            raise ValidationError(
                "Response document is not an object",
                errors=[type(document).__name__],
            )

        data = document.get("data")
        if data is None:
            return []
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]

        raise ValidationError(
            "Response data is neither an object nor a list",
            errors=[type(data).__name__],
        )
