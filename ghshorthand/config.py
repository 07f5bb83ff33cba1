"""Configuration helpers for gh-shorthand."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_ENV_VAR = "GH_SHORTHAND_CONFIG"
TOKEN_ENV_VAR = "GITHUB_TOKEN"
DEFAULT_CONFIG_PATH = Path(
    os.environ.get(CONFIG_ENV_VAR, "~/.config/gh-shorthand/config.json")
).expanduser()


@dataclass(frozen=True, slots=True)
class Config:
    """Shorthand tables and defaults loaded from the config file."""

    repos: Dict[str, str] = field(default_factory=dict)
    users: Dict[str, str] = field(default_factory=dict)
    default_repo: Optional[str] = None
    github_token: Optional[str] = None


def _read_config(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Config file at {path} is not valid JSON") from exc
    if not isinstance(data, dict):
        raise RuntimeError(f"Config file at {path} must contain a JSON object")
    return data


def _read_table(data: dict, key: str, path: Path) -> Dict[str, str]:
    raw: Any = data.get(key) or {}
    if not isinstance(raw, dict):
        raise RuntimeError(f"'{key}' in {path} must be an object of shorthand to name")
    table: Dict[str, str] = {}
    for shorthand, value in raw.items():
        if not isinstance(value, str):
            raise RuntimeError(f"'{key}.{shorthand}' in {path} must be a string")
        shorthand = shorthand.strip()
        value = value.strip()
        if shorthand and value:
            table[shorthand] = value
    return table


def _read_optional(data: dict, key: str, path: Path) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuntimeError(f"'{key}' in {path} must be a string")
    return value.strip() or None


def load_config(path: Optional[Path] = None) -> Config:
    """Load the config file, returning an empty config when it does not exist."""
    path = path or DEFAULT_CONFIG_PATH
    data = _read_config(path)
    return Config(
        repos=_read_table(data, "repos", path),
        users=_read_table(data, "users", path),
        default_repo=_read_optional(data, "default_repo", path),
        github_token=_read_optional(data, "github_token", path),
    )


def resolve_token(
    *,
    explicit: Optional[str] = None,
    config: Optional[Config] = None,
) -> Optional[str]:
    """Return a GitHub token from the explicit value, env var, or config file."""
    if explicit:
        token = explicit.strip()
        if token:
            return token
    env_token = os.getenv(TOKEN_ENV_VAR, "").strip()
    if env_token:
        return env_token
    if config is not None and config.github_token:
        return config.github_token
    return None
