"""
config.py

Responsibility: Build the immutable `ClientConfig` used by `GitHubClient`.

Sources, highest precedence first:
- an optional YAML file (top-level mapping with `base_url`/`api_base`, `token`, `timeout`)
- environment variables `GITHUB_API_URL` and `GITHUB_TOKEN`
- built-in defaults

CLI flags are applied on top of the result by `cli.py`.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a single API client."""

    base_url: str = DEFAULT_API_BASE
    token: str = ""
    timeout: float | None = DEFAULT_TIMEOUT


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")
    return data


def parse_timeout(raw: Any) -> float | None:
    if raw is None:
        return None
    # bool is an int subclass; `timeout: yes` is a mistake, not one second.
    if isinstance(raw, bool):
        raise ConfigError(f"`timeout` must be a number of seconds, got {raw!r}")
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"`timeout` must be a number of seconds, got {raw!r}") from e
    if not (0 < timeout < math.inf):
        raise ConfigError(f"`timeout` must be a positive, finite number of seconds, got {raw!r}")
    return timeout


def load_config(path: str | Path | None = None, *, environ: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Load client configuration from an optional YAML file and the environment.

    A missing token is not an error at this layer; callers decide whether one is required.
    """
    env = os.environ if environ is None else environ
    data = _read_yaml(Path(path)) if path is not None else {}

    base_url = data.get("base_url") or data.get("api_base") or env.get("GITHUB_API_URL") or DEFAULT_API_BASE
    token = data.get("token") or env.get("GITHUB_TOKEN") or ""
    timeout = parse_timeout(data["timeout"]) if "timeout" in data else DEFAULT_TIMEOUT

    return ClientConfig(
        base_url=str(base_url).strip().rstrip("/"),
        token=str(token).strip(),
        timeout=timeout,
    )
