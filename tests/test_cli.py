"""Tests for the CLI module."""

from unittest.mock import MagicMock, patch

import pytest

from schemas import BuildReport, Tag
from travel_guide.cli import main

ENV_VARS = ["CMS_URL", "CMS_API_TOKEN", "WEBSITE_API_NAME", "NODE_ENV", "ENVIRONMENT", "SITE_URL"]


@pytest.fixture
def cms_env(monkeypatch):
    """Environment pointing at a fake CMS."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CMS_URL", "https://cms.example")
    monkeypatch.setenv("CMS_API_TOKEN", "token")
    monkeypatch.setenv("WEBSITE_API_NAME", "portugal")


@pytest.fixture
def empty_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def context_mock(instance):
    """Make a MagicMock usable as a context manager returning itself."""
    instance.__enter__ = MagicMock(return_value=instance)
    instance.__exit__ = MagicMock(return_value=False)
    return instance


class TestCLIMain:
    """Tests for the main entry point."""

    def test_no_command_shows_help(self, capsys):
        """Running without a command prints help and succeeds."""
        result = main([])

        assert result == 0
        assert "travel-guide" in capsys.readouterr().out


class TestCLICheck:
    """Tests for the check command."""

    def test_check_requires_configuration(self, empty_env, caplog):
        result = main(["check"])

        assert result == 1
        assert "CMS_URL and WEBSITE_API_NAME must be set" in caplog.text

    @patch("travel_guide.cli.CmsService")
    def test_check_website_unavailable(self, mock_service_class, cms_env, caplog):
        service = context_mock(MagicMock())
        service.get_website_data.return_value = None
        mock_service_class.return_value = service

        result = main(["check"])

        assert result == 1
        assert "portugal" in caplog.text

    @patch("travel_guide.cli.CmsService")
    def test_check_prints_summary(self, mock_service_class, cms_env, website, article, capsys):
        service = context_mock(MagicMock())
        service.get_website_data.return_value = website
        service.get_articles.return_value = [article]
        service.get_tags.return_value = [Tag(name="Travel", slug="travel")]
        mock_service_class.return_value = service

        result = main(["check"])

        out = capsys.readouterr().out
        assert result == 0
        assert "Website: Portugal Travel Guide (portugal)" in out
        assert "Locales: en, it" in out
        assert "Articles (en): 1" in out
        assert "Tags (en): 1" in out

        config = mock_service_class.call_args[0][0]
        assert config.cms_url == "https://cms.example"
        assert config.website_api_name == "portugal"


class TestCLIBuild:
    """Tests for the build command."""

    @patch("travel_guide.cli.SiteBuilder")
    @patch("travel_guide.cli.CmsService")
    def test_build_success(self, mock_service_class, mock_builder_class, cms_env, tmp_path):
        mock_service_class.return_value = context_mock(MagicMock())
        mock_builder_class.return_value.build.return_value = BuildReport(
            output_dir=str(tmp_path), locales=["en", "it"]
        )

        result = main(["build", "--output", str(tmp_path / "site")])

        assert result == 0
        assert (tmp_path / "site").is_dir()
        args, kwargs = mock_builder_class.call_args
        assert args[2] == tmp_path / "site"
        assert kwargs["site_url"] is None

    @patch("travel_guide.cli.SiteBuilder")
    @patch("travel_guide.cli.CmsService")
    def test_build_site_url_option(self, mock_service_class, mock_builder_class, cms_env, tmp_path):
        mock_service_class.return_value = context_mock(MagicMock())
        mock_builder_class.return_value.build.return_value = BuildReport(output_dir=str(tmp_path))

        main(["build", "--output", str(tmp_path), "--site-url", "https://guide.example"])

        assert mock_builder_class.call_args.kwargs["site_url"] == "https://guide.example"

    @patch("travel_guide.cli.SiteBuilder")
    @patch("travel_guide.cli.CmsService")
    def test_build_partial_fails(self, mock_service_class, mock_builder_class, cms_env, tmp_path, caplog):
        mock_service_class.return_value = context_mock(MagicMock())
        mock_builder_class.return_value.build.return_value = BuildReport(
            output_dir=str(tmp_path),
            errors=["Article en/lisbon: boom"],
            status="partial",
        )

        result = main(["build", "--output", str(tmp_path)])

        assert result == 1
        assert "Article en/lisbon: boom" in caplog.text

    @patch("travel_guide.cli.SiteBuilder")
    @patch("travel_guide.cli.CmsService")
    def test_build_exception(self, mock_service_class, mock_builder_class, cms_env, tmp_path, caplog):
        mock_service_class.return_value = context_mock(MagicMock())
        mock_builder_class.return_value.build.side_effect = OSError("disk full")

        result = main(["build", "--output", str(tmp_path)])

        assert result == 1
        assert "Failed to build site: disk full" in caplog.text
