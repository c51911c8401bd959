"""Tests for CMS entity normalization."""

import pytest

from travel_guide.cms import (
    normalize_article,
    normalize_author,
    normalize_locales,
    normalize_media,
    normalize_tag,
    normalize_website,
)
from travel_guide.cms.normalize import normalize_nav_item, resolve_supported_locales


class TestNormalizeMedia:
    """Tests for normalize_media."""

    def test_bare_media(self):
        """A bare media object keeps its url and alt text."""
        media = normalize_media({"id": 4, "url": "/uploads/a.jpg", "alternativeText": "A", "width": 800.0})

        assert media.url == "/uploads/a.jpg"
        assert media.alternative_text == "A"
        assert media.width == 800

    def test_wrapped_media(self):
        """Relation-wrapped media is unwrapped."""
        media = normalize_media({"data": {"id": 4, "attributes": {"url": "/uploads/a.jpg"}}})

        assert media.id == 4
        assert media.url == "/uploads/a.jpg"

    def test_list_media_uses_first(self):
        """A media list yields its first element."""
        media = normalize_media([{"url": "/first.jpg"}, {"url": "/second.jpg"}])

        assert media.url == "/first.jpg"

    def test_alt_fallback(self):
        """alt is used when alternativeText is absent."""
        assert normalize_media({"url": "/a.jpg", "alt": "Alt"}).alternative_text == "Alt"

    @pytest.mark.parametrize("value", [None, {"data": None}, {"alternativeText": "x"}, {"url": ""}, []])
    def test_no_url(self, value):
        """Media without a url is absent."""
        assert normalize_media(value) is None


class TestNormalizeLocales:
    """Tests for normalize_locales."""

    def test_list(self):
        assert normalize_locales(["en", " it ", "en", "", 3]) == ["en", "it"]

    def test_json_string(self):
        assert normalize_locales('["en", "pt"]') == ["en", "pt"]

    def test_invalid_json_string(self):
        assert normalize_locales('["en", ') == []

    def test_csv_string(self):
        assert normalize_locales("en, pt,en") == ["en", "pt"]

    def test_other_values(self):
        assert normalize_locales(None) == []
        assert normalize_locales({"en": True}) == []


class TestResolveSupportedLocales:
    """Tests for the supported locale union."""

    def test_union_order(self):
        """Own locale, default, raw list, then localizations."""
        from schemas import WebsiteLocalization

        locales = resolve_supported_locales(
            "it", "en", "pt,en", [WebsiteLocalization(locale="fr"), WebsiteLocalization(locale="it")]
        )

        assert locales == ["it", "en", "pt", "fr"]

    def test_never_empty(self):
        assert resolve_supported_locales(None, None, None, []) == ["en"]


class TestNormalizeNavItem:
    """Tests for navigation items."""

    def test_unknown_link_type_is_internal(self):
        item = normalize_nav_item({"label": "About", "linkType": "internal", "path": "/about"})

        assert item.link_type == "internal_route"

    def test_external(self):
        item = normalize_nav_item({"label": "X", "linkType": "external_url", "url": "https://x.example"})

        assert item.link_type == "external_url"
        assert item.url == "https://x.example"
        assert item.open_in_new_tab is False


class TestNormalizeTag:
    """Tests for normalize_tag."""

    def test_keeps_whitelisted_fields(self):
        """Back-references to articles and websites are dropped."""
        tag = normalize_tag({"id": 1, "name": "Travel", "slug": "travel", "articles": [{"id": 9}]})

        assert tag.name == "Travel"
        assert tag.slug == "travel"
        assert not hasattr(tag, "articles")

    def test_attributes_shape(self):
        tag = normalize_tag({"id": 1, "attributes": {"name": "Food", "slug": "food"}})

        assert tag.id == 1
        assert tag.name == "Food"

    def test_not_an_object(self):
        assert normalize_tag("travel") is None
        assert normalize_tag(None) is None


class TestNormalizeArticle:
    """Tests for normalize_article."""

    def test_sample_article(self, raw_article):
        article = normalize_article(raw_article)

        assert article.slug == "sample-article"
        assert article.cover_image.url == "/uploads/article.jpg"
        assert article.reading_time == 5
        assert [tag.slug for tag in article.tags] == ["travel"]
        assert article.author.name == "Ana Costa"

    def test_wrapped_relations(self, raw_article):
        """Relations in wrapped form normalize the same as flat ones."""
        raw_article["tags"] = {"data": [{"id": 7, "attributes": {"name": "Travel", "slug": "travel"}}]}
        raw_article["author"] = {"data": {"id": 3, "attributes": {"name": "Ana Costa"}}}
        raw_article["coverImage"] = {"data": {"id": 2, "attributes": {"url": "/uploads/article.jpg"}}}

        article = normalize_article(raw_article)

        assert article.tags[0].name == "Travel"
        assert article.author.name == "Ana Costa"
        assert article.cover_image.url == "/uploads/article.jpg"

    def test_missing_optional_fields(self):
        article = normalize_article({"id": 1, "title": "T", "slug": "t"})

        assert article.summary is None
        assert article.cover_image is None
        assert article.tags == []
        assert article.author is None
        assert article.reading_time is None

    def test_non_integral_reading_time_dropped(self, raw_article):
        raw_article["readingTime"] = 4.5

        assert normalize_article(raw_article).reading_time is None

    def test_last_modified_precedence(self, raw_article):
        raw_article["updatedAt"] = None

        assert normalize_article(raw_article).last_modified == "2025-01-02T00:00:00.000Z"


class TestNormalizeAuthor:
    """Tests for normalize_author."""

    def test_avatar(self):
        author = normalize_author({"name": "Ana", "avatar": {"data": {"attributes": {"url": "/a.png"}}}})

        assert author.avatar.url == "/a.png"


class TestNormalizeWebsite:
    """Tests for normalize_website."""

    def test_sample_website(self, raw_website):
        website = normalize_website(raw_website)

        assert website.api_name == "portugal"
        assert website.brand.logo.url == "/uploads/logo.png"
        assert website.homepage_hero.image.url == "/uploads/hero.png"
        assert website.header.primary_nav[0].label == "Destinations"
        assert website.footer.link_groups[0].links[0].label == "Our Mission"
        assert website.system_labels.search_placeholder == "Search articles…"
        assert website.theme.palette.accent == "#FFD141"
        assert website.supported_locales == ["en", "it"]

    def test_wrapped_website(self, raw_website):
        """An attributes-shaped website with wrapped relations normalizes the same."""
        attributes = dict(raw_website)
        attributes.pop("id")
        attributes["brand"] = {"data": {"id": 5, "attributes": raw_website["brand"]}}
        attributes["localizations"] = {"data": [{"id": 2, "attributes": {"locale": "it"}}]}

        website = normalize_website({"data": {"id": 1, "attributes": attributes}})

        assert website.id == 1
        assert website.brand.favicon.url == "/uploads/favicon.png"
        assert website.localizations[0].locale == "it"

    def test_locale_defaults(self):
        """Missing locale fields fall back to English."""
        website = normalize_website({"id": 1, "name": "Bare"})

        assert website.locale == "en"
        assert website.default_locale == "en"
        assert website.supported_locales == ["en"]

    def test_locale_falls_back_to_default_locale(self):
        website = normalize_website({"id": 1, "defaultLocale": "pt"})

        assert website.locale == "pt"
        assert website.default_locale == "pt"

    def test_blank_default_locale_kept(self):
        website = normalize_website({"id": 1, "locale": "fr", "defaultLocale": "", "supportedLocales": ["fr", "it"]})

        assert website.default_locale == ""
        assert website.locale == "fr"
        assert website.supported_locales == ["fr", "it"]

    def test_localizations_extend_supported_locales(self, raw_website):
        raw_website["supportedLocales"] = None
        raw_website["localizations"] = [{"locale": "es"}, {"locale": "fr"}]

        website = normalize_website(raw_website)

        assert website.supported_locales == ["en", "es", "fr"]

    def test_csv_supported_locales(self, raw_website):
        raw_website["supportedLocales"] = "en,pt"
        raw_website["localizations"] = []

        assert normalize_website(raw_website).supported_locales == ["en", "pt"]

    def test_partial_palette(self, raw_website):
        raw_website["theme"] = {"brandColor": "#123456", "palette": {"primary": "#123456"}}

        website = normalize_website(raw_website)

        assert website.theme.palette.primary == "#123456"
        assert website.theme.palette.secondary is None

    def test_not_an_object(self):
        assert normalize_website(None) is None
        assert normalize_website({"data": None}) is None
