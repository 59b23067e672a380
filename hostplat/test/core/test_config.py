"""Tests for hostplat.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from hostplat.core.config import Config, ConfigError, load_config
from hostplat.core.result import Err, Ok


class TestConfig:
    """Test Config construction."""

    def test_defaults(self) -> None:
        assert Config().properties == {}

    def test_from_dict(self) -> None:
        config = Config.from_dict({"properties": {"os.name": "SunOS", "os.arch": "x86"}})
        assert config.properties == {"os.name": "SunOS", "os.arch": "x86"}

    def test_from_dict_without_table(self) -> None:
        assert Config.from_dict({}).properties == {}

    def test_from_dict_rejects_non_string(self) -> None:
        with pytest.raises(ValueError, match="os.arch"):
            Config.from_dict({"properties": {"os.arch": 64}})

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.properties = {}  # type: ignore[misc]


class TestLoadConfig:
    """Test loading from disk."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "hostplat.toml"
        path.write_text('[properties]\n"os.name" = "Mac OS X"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.properties == {"os.name": "Mac OS X"}

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert result.error.not_found is True
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[properties\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.not_found is False

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('[properties]\n"arch.data.model" = 64\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message
        assert result.error.path == path

