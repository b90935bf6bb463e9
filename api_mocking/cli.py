"""
cli.py

Responsibility: CLI entrypoint for creating a repository.

Flow (single command `create`):
1) Load configuration (YAML file / environment) -> `ClientConfig`
2) Apply CLI overrides
3) Call `GitHubClient.create_repo` and print the new repository URL

API interaction lives in `github_client.py`; configuration loading in `config.py`.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from api_mocking.config import ConfigError, load_config, parse_timeout
from api_mocking.github_client import GitHubClient, GitHubError

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _timeout_arg(raw: str) -> float:
    try:
        return parse_timeout(raw)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_cmd(args: argparse.Namespace) -> int:
    config = load_config(args.config)

    overrides: dict[str, object] = {}
    if args.api_base:
        overrides["base_url"] = args.api_base
    if args.github_token:
        overrides["token"] = args.github_token
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    config = replace(config, **overrides)

    if not config.token:
        raise CLIError("GitHub token is required (use --github-token or set GITHUB_TOKEN)")

    gh = GitHubClient.from_config(config)
    url = gh.create_repo(args.name, args.private)
    print(f"Repo URL: {url}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="api-mocking", description="Create a repository through the GitHub REST API")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("create", help="Create a repository for the authenticated user")
    c.add_argument("name", help="Repository name")
    c.add_argument("--config", default=None, help="Path to a YAML config file (base_url, token, timeout)")
    c.add_argument("--api-base", default=None, help="API base URL (default: https://api.github.com)")
    c.add_argument("--github-token", default=None, help="GitHub token (or set env GITHUB_TOKEN)")
    c.add_argument("--timeout", type=_timeout_arg, default=None, help="Request timeout in seconds")
    c.add_argument("--private", dest="private", action="store_true", default=True, help="Create a private repo (default)")
    c.add_argument("--public", dest="private", action="store_false", help="Create a public repo")

    c.set_defaults(func=create_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return int(args.func(args))
    except (GitHubError, ConfigError, CLIError) as e:
        logger.error("Cannot create repo: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
