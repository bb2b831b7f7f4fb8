"""Tests for search configuration loading."""

import tempfile
from pathlib import Path

import pytest
import yaml

from chartsearch.config import CONFIG_ENV_VAR, DEFAULT_MAX_SCORE, ConfigError, SearchConfig, load_config


def _write_config(tmpdir: str, data) -> Path:
    path = Path(tmpdir) / "chartsearch.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


def test_defaults_without_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config == SearchConfig()
    assert config.max_score == DEFAULT_MAX_SCORE


def test_load_config():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(
            tmpdir,
            {
                "max_score": 3,
                "regexp": True,
                "ignore_case": True,
                "repositories": {"stable": "stable/index.yaml", "abs": "/srv/index.yaml"},
            },
        )
        config = load_config(path)

        assert config.max_score == 3
        assert config.regexp is True
        assert config.ignore_case is True
        assert config.repositories["stable"] == Path(tmpdir) / "stable" / "index.yaml"
        assert config.repositories["abs"] == Path("/srv/index.yaml")


def test_load_config_from_env(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"max_score": 7})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().max_score == 7


def test_load_config_empty_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "chartsearch.yaml"
        path.write_text("")
        assert load_config(path) == SearchConfig()


def test_load_config_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ConfigError):
            load_config(Path(tmpdir) / "missing.yaml")


def test_load_config_not_a_mapping():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, ["a", "b"])
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(path)


def test_load_config_bad_repositories():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"repositories": ["stable"]})
        with pytest.raises(ConfigError, match="'repositories' must be a mapping"):
            load_config(path)


def test_load_config_bad_max_score():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"max_score": "lots"})
        with pytest.raises(ConfigError, match="'max_score' must be an integer"):
            load_config(path)


def test_load_config_rejects_non_bool_flags():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"regexp": "false"})
        with pytest.raises(ConfigError, match="'regexp' must be true or false"):
            load_config(path)

        path = _write_config(tmpdir, {"ignore_case": 1})
        with pytest.raises(ConfigError, match="'ignore_case' must be true or false"):
            load_config(path)
