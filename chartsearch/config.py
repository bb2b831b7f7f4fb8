"""Search configuration — repositories to load and default query options.

Configuration lives in a YAML file::

    max_score: 25
    regexp: false
    ignore_case: false
    repositories:
      stable: ./stable/index.yaml
      incubator: /srv/charts/incubator/index.yaml

Relative repository paths are resolved against the config file's directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "CHARTSEARCH_CONFIG"

# Charts scoring above this are not worth showing.
DEFAULT_MAX_SCORE = 25


class ConfigError(ValueError):
    """The configuration file is missing or malformed."""


@dataclass
class SearchConfig:
    """Resolved search settings."""

    max_score: int = DEFAULT_MAX_SCORE
    regexp: bool = False
    ignore_case: bool = False
    repositories: dict[str, Path] = field(default_factory=dict)


def load_config(path: str | Path | None = None) -> SearchConfig:
    """Load the search configuration.

    With no *path*, falls back to ``$CHARTSEARCH_CONFIG``; if that is unset
    too, returns the defaults. An explicitly named file must exist.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return SearchConfig()

    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    repos = data.get("repositories") or {}
    if not isinstance(repos, dict):
        raise ConfigError(f"Config file {path}: 'repositories' must be a mapping")

    try:
        max_score = int(data.get("max_score", DEFAULT_MAX_SCORE))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Config file {path}: 'max_score' must be an integer") from e

    for key in ("regexp", "ignore_case"):
        if not isinstance(data.get(key, False), bool):
            raise ConfigError(f"Config file {path}: '{key}' must be true or false")

    base = path.parent
    return SearchConfig(
        max_score=max_score,
        regexp=data.get("regexp", False),
        ignore_case=data.get("ignore_case", False),
        repositories={str(name): base / str(p) for name, p in repos.items()},
    )
