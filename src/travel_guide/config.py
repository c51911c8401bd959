"""Site configuration loaded from environment variables.

Variables:
    CMS_URL: Base URL of the headless CMS (e.g. https://cms.example.com)
    CMS_API_TOKEN: Bearer token for the CMS REST API
    WEBSITE_API_NAME: apiName of the website entry to render
    NODE_ENV / ENVIRONMENT: "development" enables the request tracker
    SITE_URL: Public base URL of the rendered site
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEVELOPMENT = "development"
PRODUCTION = "production"


class SiteConfig(BaseModel):
    """Settings shared by the CMS service, page loaders and the builder."""

    cms_url: str | None = None
    cms_api_token: str | None = None
    website_api_name: str | None = None
    environment: str = PRODUCTION
    site_url: str | None = None
    timeout: float = 30
    retry_attempts: int = 2
    retry_delay: float = 0.5

    @field_validator("cms_url", "cms_api_token", "website_api_name", "site_url", mode="before")
    @classmethod
    def _blank_as_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, value):
        return value or PRODUCTION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SiteConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            SiteConfig with unset variables left as None
        """
        env = os.environ if environ is None else environ
        config = cls(
            cms_url=env.get("CMS_URL"),
            cms_api_token=env.get("CMS_API_TOKEN"),
            website_api_name=env.get("WEBSITE_API_NAME"),
            environment=env.get("NODE_ENV") or env.get("ENVIRONMENT"),
            site_url=env.get("SITE_URL"),
        )
        logger.debug(f"Loaded config for environment {config.environment}")
        return config

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    @property
    def cms_base_url(self) -> str:
        """CMS URL without a trailing slash, or an empty string when unset."""
        return (self.cms_url or "").rstrip("/")

    def client_config(self) -> dict:
        """Config dict for travel_guide.clients.Client subclasses."""
        headers = {"Content-Type": "application/json"}
        if self.cms_api_token:
            headers["Authorization"] = f"Bearer {self.cms_api_token}"

        return {
            "base_url": self.cms_base_url,
            "timeout": self.timeout,
            "retry_attempts": self.retry_attempts,
            "retry_delay": self.retry_delay,
            "headers": headers,
        }
