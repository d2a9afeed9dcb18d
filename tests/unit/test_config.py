"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from subid_patterns.config import CONFIG_FILENAME, Config, RenderConfig, load_default_config
from subid_patterns.exceptions import ConfigError


class TestConfigDefaults:
    """Tests for default values."""

    def test_defaults(self) -> None:
        config = Config()

        assert config.render.timestamp_unit == "milliseconds"
        assert config.render.utc is False
        assert config.suggestion.fallback_length == 10
        assert config.suggestion.suffix_length == 4
        assert config.suggestion.max_attempts == 16

    def test_load_default_config(self) -> None:
        assert load_default_config().render.timestamp_unit == "milliseconds"

    def test_invalid_env_override_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a bad environment override raises ConfigError when loaded."""
        monkeypatch.setenv("SUBID_RENDER_TIMESTAMP_UNIT", "minutes")

        with pytest.raises(ConfigError, match="SUBID_"):
            load_default_config()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUBID_RENDER_TIMESTAMP_UNIT", "seconds")

        assert RenderConfig().timestamp_unit == "seconds"

    def test_invalid_unit_rejected(self) -> None:
        with pytest.raises(ValueError):
            RenderConfig(timestamp_unit="minutes")


class TestConfigToml:
    """Tests for TOML round trips and discovery."""

    def test_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / CONFIG_FILENAME
            path.write_text(
                '[render]\ntimestamp_unit = "seconds"\n\n[suggestion]\nsuffix_length = 6\n'
            )

            config = Config.from_toml(path)

        assert config.render.timestamp_unit == "seconds"
        assert config.suggestion.suffix_length == 6
        assert config.suggestion.fallback_length == 10

    def test_to_toml_round_trip(self) -> None:
        original = Config(render={"timestamp_unit": "seconds", "utc": True})

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / CONFIG_FILENAME
            original.to_toml(path)
            loaded = Config.from_toml(path)

        assert loaded.render.timestamp_unit == "seconds"
        assert loaded.render.utc is True
        assert loaded.suggestion.max_attempts == original.suggestion.max_attempts

    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            Config.from_toml("/nonexistent/subid-patterns.toml")

    def test_invalid_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / CONFIG_FILENAME
            path.write_text("[render\n")

            with pytest.raises(ConfigError, match="Invalid configuration"):
                Config.from_toml(path)

    def test_invalid_value(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / CONFIG_FILENAME
            path.write_text("[suggestion]\nmax_attempts = 0\n")

            with pytest.raises(ConfigError):
                Config.from_toml(path)

    def test_find_and_load_walks_up(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / CONFIG_FILENAME).write_text('[render]\ntimestamp_unit = "seconds"\n')
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            config = Config.find_and_load(nested)

        assert config.render.timestamp_unit == "seconds"

    def test_find_and_load_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with pytest.raises(FileNotFoundError, match="subid-patterns init"):
                Config.find_and_load(Path(tmp))
