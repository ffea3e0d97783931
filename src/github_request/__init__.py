"""GitHub REST API 请求辅助库"""

from github_request.api.github import GitHubApi
from github_request.config.settings import Config, GitHubConfig
from github_request.core.exceptions import (
    RequestClientError,
    TransportError,
    UnsupportedMethodError,
)
from github_request.core.models import RateLimit, RequestResult
from github_request.services.request_client import RequestClient

__version__ = "0.1.0"

__all__ = [
    "Config",
    "GitHubApi",
    "GitHubConfig",
    "RateLimit",
    "RequestClient",
    "RequestClientError",
    "RequestResult",
    "TransportError",
    "UnsupportedMethodError",
]
