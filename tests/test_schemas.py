"""Tests for schema definitions."""

import json

import pytest
from pydantic import ValidationError

from schemas import (
    Article,
    BuildFile,
    BuildReport,
    MediaAsset,
    NavMenuItem,
    Tag,
    Website,
)


class TestCmsEntity:
    """Tests for camelCase aliasing shared by CMS models."""

    def test_accepts_camel_case(self):
        asset = MediaAsset.model_validate({"url": "/a.jpg", "alternativeText": "Alt"})

        assert asset.alternative_text == "Alt"

    def test_accepts_snake_case(self):
        asset = MediaAsset(url="/a.jpg", alternative_text="Alt")

        assert asset.alternative_text == "Alt"

    def test_dumps_camel_case_by_alias(self):
        asset = MediaAsset(url="/a.jpg", alternative_text="Alt")

        data = asset.model_dump(by_alias=True, exclude_none=True)

        assert data == {"url": "/a.jpg", "alternativeText": "Alt"}

    def test_media_requires_url(self):
        with pytest.raises(ValidationError):
            MediaAsset.model_validate({"alternativeText": "Alt"})


class TestWebsite:
    """Tests for the Website aggregate."""

    def test_defaults(self):
        website = Website()

        assert website.locale == "en"
        assert website.default_locale == "en"
        assert website.supported_locales == ["en"]
        assert website.theme is None
        assert website.articles == []

    def test_nested_models(self, raw_website):
        website = Website.model_validate(raw_website)

        assert website.api_name == "portugal"
        assert website.theme.brand_color == "#FF8A00"
        assert website.theme.palette.secondary == "#0EA5B5"
        assert website.header.primary_nav[0].label == "Destinations"
        assert website.footer.link_groups[0].links[0].path == "/mission"
        assert website.localizations[0].locale == "it"

    def test_default_lists_not_shared(self):
        first = Website()
        first.supported_locales.append("it")

        assert Website().supported_locales == ["en"]


class TestNavMenuItem:
    def test_link_type_default(self):
        assert NavMenuItem(label="Home").link_type == "internal_route"

    def test_rejects_unknown_link_type(self):
        with pytest.raises(ValidationError):
            NavMenuItem.model_validate({"label": "Home", "linkType": "mailto"})


class TestArticle:
    """Tests for Article."""

    def test_nested_models(self, raw_article):
        article = Article.model_validate(raw_article)

        assert article.cover_image.url == "/uploads/article.jpg"
        assert article.tags == [Tag(id=7, name="Travel", slug="travel")]
        assert article.author.name == "Ana Costa"
        assert article.reading_time == 5

    def test_last_modified_prefers_updated(self):
        article = Article(
            created_at="2025-01-01T00:00:00.000Z",
            updated_at="2025-01-03T00:00:00.000Z",
            published_at="2025-01-02T00:00:00.000Z",
        )

        assert article.last_modified == "2025-01-03T00:00:00.000Z"

    def test_last_modified_fallbacks(self):
        assert Article(published_at="p", created_at="c").last_modified == "p"
        assert Article(created_at="c").last_modified == "c"
        assert Article().last_modified is None


class TestBuildReport:
    """Tests for the build report schema."""

    def test_defaults(self):
        report = BuildReport(output_dir="dist")

        assert report.status == "complete"
        assert report.files == []
        assert report.errors == []

    def test_json_round_trip(self):
        report = BuildReport(
            output_dir="dist",
            base_url="https://guide.example",
            locales=["en"],
            files=[BuildFile(path="en/index.html", kind="homepage", locale="en")],
            status="partial",
            errors=["Article en/lisbon: boom"],
        )

        data = json.loads(report.model_dump_json())

        assert data["files"][0] == {"path": "en/index.html", "kind": "homepage", "locale": "en"}
        assert BuildReport.model_validate(data) == report

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            BuildFile(path="x", kind="stylesheet")

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            BuildReport(output_dir="dist", status="done")
