"""Tests for site configuration."""

from travel_guide.config import SiteConfig


class TestFromEnv:
    """Tests for SiteConfig.from_env."""

    def test_reads_variables(self):
        config = SiteConfig.from_env({
            "CMS_URL": "https://cms.example/",
            "CMS_API_TOKEN": "token",
            "WEBSITE_API_NAME": "portugal",
            "NODE_ENV": "development",
            "SITE_URL": "https://travel.example",
        })

        assert config.cms_url == "https://cms.example/"
        assert config.cms_api_token == "token"
        assert config.website_api_name == "portugal"
        assert config.site_url == "https://travel.example"
        assert config.is_development

    def test_empty_environment(self):
        config = SiteConfig.from_env({})

        assert config.cms_url is None
        assert config.environment == "production"
        assert not config.is_development

    def test_blank_values_are_unset(self):
        config = SiteConfig.from_env({"CMS_URL": "  ", "WEBSITE_API_NAME": ""})

        assert config.cms_url is None
        assert config.website_api_name is None

    def test_environment_fallback(self):
        assert SiteConfig.from_env({"ENVIRONMENT": "development"}).is_development
        assert not SiteConfig.from_env({"NODE_ENV": "test", "ENVIRONMENT": "development"}).is_development


class TestClientConfig:
    """Tests for the HTTP client config dict."""

    def test_with_token(self):
        config = SiteConfig(cms_url="https://cms.example/", cms_api_token="secret")

        client_config = config.client_config()

        assert client_config["base_url"] == "https://cms.example"
        assert client_config["headers"] == {
            "Content-Type": "application/json",
            "Authorization": "Bearer secret",
        }
        assert client_config["timeout"] == 30
        assert client_config["retry_attempts"] == 2

    def test_without_token(self):
        headers = SiteConfig(cms_url="https://cms.example").client_config()["headers"]

        assert "Authorization" not in headers

    def test_cms_base_url_unset(self):
        assert SiteConfig().cms_base_url == ""
