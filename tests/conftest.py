"""Pytest fixtures for travel guide tests."""

import copy
from unittest.mock import MagicMock

import httpx
import pytest

from travel_guide.clients import RequestTracker
from travel_guide.cms import CmsService
from travel_guide.config import SiteConfig

SAMPLE_WEBSITE = {
    "id": 1,
    "documentId": "doc-1",
    "apiName": "portugal",
    "name": "Portugal Travel Guide",
    "locale": "en",
    "defaultLocale": "en",
    "supportedLocales": ["en", "it"],
    "brand": {
        "logo": {"url": "/uploads/logo.png", "alternativeText": "Logo"},
        "favicon": {"url": "/uploads/favicon.png", "alternativeText": "Favicon"},
    },
    "theme": {
        "brandColor": "#FF8A00",
        "palette": {
            "primary": "#FF8A00",
            "secondary": "#0EA5B5",
            "accent": "#FFD141",
            "background": "#FFFFFF",
            "surface": "#F6F7F9",
            "muted": "#94A3B8",
            "neutral": "#111827",
        },
    },
    "homepageHero": {
        "alt": "Hero alt text",
        "image": {"url": "/uploads/hero.png", "alternativeText": "Hero alt text"},
    },
    "seoDefaults": {
        "metaTitle": "Portugal Travel Guide - Your Travel Companion",
        "metaDescription": "Plan your trip to Portugal with curated itineraries.",
    },
    "header": {
        "brandDisplayName": "Portugal Travel Guide",
        "tagline": "Discover Portugal",
        "primaryNav": [
            {
                "id": 10,
                "label": "Destinations",
                "linkType": "internal_route",
                "path": "/destinations",
                "openInNewTab": False,
            },
        ],
    },
    "footer": {
        "aboutText": "About Portugal Travel Guide",
        "copyrightText": "© 2025 Portugal Travel Guide",
        "linkGroups": [
            {
                "id": 1,
                "groupTitle": "About",
                "links": [
                    {
                        "id": 11,
                        "label": "Our Mission",
                        "linkType": "internal_route",
                        "path": "/mission",
                        "openInNewTab": False,
                    },
                ],
            },
        ],
    },
    "systemLabels": {
        "searchPlaceholder": "Search articles…",
        "readMoreLabel": "Read more",
        "backToHomeLabel": "Back to home",
    },
    "localizations": [
        {"id": 2, "locale": "it", "documentId": "doc-1-it"},
    ],
    "createdAt": "2025-01-01T00:00:00.000Z",
    "updatedAt": "2025-01-02T00:00:00.000Z",
    "publishedAt": "2025-01-03T00:00:00.000Z",
}

SAMPLE_ARTICLE = {
    "id": 1,
    "documentId": "article-1",
    "title": "Sample article",
    "slug": "sample-article",
    "summary": "Summary",
    "body": "Body",
    "coverImage": {"url": "/uploads/article.jpg", "alternativeText": "Article image"},
    "readingTime": 5,
    "tags": [{"id": 7, "name": "Travel", "slug": "travel"}],
    "author": {"id": 3, "name": "Ana Costa"},
    "locale": "en",
    "createdAt": "2025-01-01T00:00:00.000Z",
    "updatedAt": "2025-01-02T00:00:00.000Z",
    "publishedAt": "2025-01-02T00:00:00.000Z",
}

PAGINATION_META = {"pagination": {"page": 1, "pageSize": 25, "pageCount": 1, "total": 1}}


def collection(*entities):
    """A CMS collection response document."""
    return {"data": list(entities), "meta": PAGINATION_META}


@pytest.fixture
def raw_website():
    """Flat raw website entity as returned by the CMS."""
    return copy.deepcopy(SAMPLE_WEBSITE)


@pytest.fixture
def raw_article():
    """Flat raw article entity as returned by the CMS."""
    return copy.deepcopy(SAMPLE_ARTICLE)


@pytest.fixture
def website_response(raw_website):
    return collection(raw_website)


@pytest.fixture
def articles_response(raw_article):
    return collection(raw_article)


@pytest.fixture
def site_config():
    """Configuration pointing at a fake CMS, no retries."""
    return SiteConfig(
        cms_url="https://cms.example",
        cms_api_token="token",
        website_api_name="portugal",
        environment="test",
        retry_attempts=1,
    )


@pytest.fixture
def mock_http():
    """MagicMock standing in for httpx.Client."""
    return MagicMock()


@pytest.fixture
def make_service(mock_http):
    """Factory for a CmsService whose HTTP client is mocked.

    Responses are routed by a callable receiving the request URL, or a
    single document returned for every request.
    """

    def factory(config, responder, tracker=None):
        service = CmsService(config, tracker=tracker if tracker is not None else RequestTracker())

        def request(method, url, **kwargs):
            result = responder(httpx.URL(str(url))) if callable(responder) else responder
            if isinstance(result, Exception):
                raise result
            if isinstance(result, httpx.Response):
                return result
            return httpx.Response(200, json=result)

        mock_http.request.side_effect = request
        service.client._client = mock_http
        return service

    return factory


@pytest.fixture
def service(site_config, make_service, website_response, articles_response):
    """CmsService answering websites and articles with the sample documents."""

    def responder(url):
        if url.path == "/api/websites":
            return website_response
        if url.path == "/api/articles":
            return articles_response
        return collection()

    return make_service(site_config, responder)


@pytest.fixture
def website(raw_website):
    """Normalized sample website."""
    from travel_guide.cms import normalize_website

    return normalize_website(raw_website)


@pytest.fixture
def article(raw_article):
    """Normalized sample article."""
    from travel_guide.cms import normalize_article

    return normalize_article(raw_article)


@pytest.fixture
def fake_service(website, article):
    """MagicMock CmsService serving the sample website in its own locale."""
    from schemas import Tag

    service = MagicMock(spec=CmsService)

    def localized(locale):
        if locale in website.supported_locales:
            return website.model_copy(update={"locale": locale})
        return website

    service.get_website_data.return_value = website
    service.get_localized_website_data.side_effect = localized
    service.get_articles.return_value = [article]
    service.get_tags.return_value = [Tag(name="Travel", slug="travel")]
    service.get_http_requests.return_value = []
    service.get_article_by_slug.side_effect = lambda slug, locale=None: article if slug == article.slug else None
    return service
