"""
api_mocking package

A minimal GitHub REST client for repository creation, kept small so its
HTTP interaction can be verified against mocked responses in tests.

Modules:
- `github_client.py`: the `/user/repos` call and its error types
- `config.py`: client configuration from YAML / environment
- `cli.py`: CLI entrypoint (load config -> create repo -> print URL)
"""

from __future__ import annotations

from api_mocking.config import ClientConfig, ConfigError, load_config
from api_mocking.github_client import (
    GitHubClient,
    GitHubError,
    MissingFieldError,
    RequestBuildError,
    ResponseParseError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "__version__",
    "ClientConfig",
    "ConfigError",
    "GitHubClient",
    "GitHubError",
    "MissingFieldError",
    "RequestBuildError",
    "ResponseParseError",
    "TransportError",
    "UnexpectedStatusError",
    "load_config",
]

__version__ = "0.1.0"
