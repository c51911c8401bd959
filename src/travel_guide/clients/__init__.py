"""Network clients for the headless CMS."""

from .client import Client
from .cms_client import CmsClient
from .exceptions import (
    APIError,
    ClientError,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .tracker import HttpRequestRecord, RequestTracker, default_tracker

__all__ = [
    "Client",
    "CmsClient",
    "ClientError",
    "ConfigurationError",
    "ConnectionError",
    "APIError",
    "DecodeError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
    "HttpRequestRecord",
    "RequestTracker",
    "default_tracker",
]
