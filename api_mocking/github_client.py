"""
github_client.py

Responsibility: Isolate the GitHub REST API call that creates a repository.

This module is the only place that:
- Constructs the `/user/repos` endpoint URL and request headers
- Sends the HTTP request
- Interprets the response status and JSON payload

Failures are raised as `GitHubError` subclasses; nothing is retried or logged
as an error here. Presenting failures is the caller's job (see `cli.py`).
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from api_mocking.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, ClientConfig, parse_timeout

logger = logging.getLogger(__name__)


class GitHubError(RuntimeError):
    pass


class RequestBuildError(GitHubError):
    """The HTTP request could not be constructed."""


class TransportError(GitHubError):
    """The HTTP request could not be completed."""


class ResponseParseError(GitHubError):
    """The response body is not valid JSON."""


class UnexpectedStatusError(GitHubError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Unexpected HTTP response code: {code}")
        self.code = code


class MissingFieldError(GitHubError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing field in HTTP response: {field}")
        self.field = field


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_base: str = DEFAULT_API_BASE,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        """Raises `ConfigError` when `timeout` is not a positive number of seconds or None."""
        self._config = ClientConfig(base_url=api_base.rstrip("/"), token=token, timeout=parse_timeout(timeout))

    @classmethod
    def from_config(cls, config: ClientConfig) -> GitHubClient:
        return cls(config.token, config.base_url, timeout=config.timeout)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self._config.token}",
            "Content-Type": "application/json",
        }

    def _prepare(self, method: str, path: str, *, json_body: dict[str, Any]) -> requests.PreparedRequest:
        url = f"{self._config.base_url}{path}"
        try:
            return requests.Request(method, url, headers=self._headers(), json=json_body).prepare()
        except (requests.RequestException, ValueError) as e:
            raise RequestBuildError(f"Cannot build request {method} {url}: {e}") from e

    def _send(self, prepared: requests.PreparedRequest) -> requests.Response:
        logger.debug("Sending %s %s", prepared.method, prepared.url)
        try:
            with requests.Session() as session:
                return session.send(prepared, timeout=self._config.timeout)
        except requests.RequestException as e:
            raise TransportError(f"HTTP client error {prepared.method} {prepared.url}: {e}") from e

    def create_repo(self, name: str, private: bool) -> str:
        """
        Create a repository for the authenticated user and return its `html_url`.

        https://docs.github.com/en/rest/repos/repos#create-a-repository-for-the-authenticated-user

        Only `201 Created` counts as success; any other status raises
        `UnexpectedStatusError` without inspecting the body.
        """
        prepared = self._prepare("POST", "/user/repos", json_body={"name": name, "private": private})
        r = self._send(prepared)

        if r.status_code != 201:
            raise UnexpectedStatusError(r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise ResponseParseError(f"JSON parser error: {e}") from e

        html_url = data.get("html_url") if isinstance(data, dict) else None
        if not isinstance(html_url, str):
            raise MissingFieldError("html_url")

        logger.debug("Created repository %s at %s", name, html_url)
        return html_url
