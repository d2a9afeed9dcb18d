"""
Configuration management for subid-patterns.

Loads and validates configuration from subid-patterns.toml files using Pydantic.
Every field can also be set from the environment, e.g.
``SUBID_RENDER_TIMESTAMP_UNIT=seconds``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from subid_patterns.exceptions import ConfigError

CONFIG_FILENAME = "subid-patterns.toml"


class RenderConfig(BaseSettings):
    """Renderer configuration."""

    model_config = SettingsConfigDict(env_prefix="SUBID_RENDER_")

    timestamp_unit: Literal["milliseconds", "seconds"] = Field(
        default="milliseconds",
        description="Unit of the {timestamp} placeholder (Unix epoch)",
    )
    utc: bool = Field(
        default=False,
        description="Read date placeholders in UTC instead of local time",
    )


class SuggestionConfig(BaseSettings):
    """Pattern suggestion configuration."""

    model_config = SettingsConfigDict(env_prefix="SUBID_SUGGESTION_")

    fallback_length: int = Field(
        default=10,
        ge=1,
        description="Length of the {randNchars} run in a synthesized fallback",
    )
    suffix_length: int = Field(
        default=4,
        ge=0,
        description="Length of the random literal suffix in a synthesized fallback",
    )
    max_attempts: int = Field(
        default=16,
        ge=1,
        description="Fallback candidates to try before giving up on uniqueness",
    )


class Config(BaseSettings):
    """Main configuration for subid-patterns."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    suggestion: SuggestionConfig = Field(default_factory=SuggestionConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to subid-patterns.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config file is not valid TOML or fails validation
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            try:
                return cls(**tomllib.load(f))
            except (tomllib.TOMLDecodeError, ValidationError) as e:
                raise ConfigError(config_path, str(e)) from e

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from subid-patterns.toml.

        Searches for subid-patterns.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories. "
            f"Run 'subid-patterns init' to create one."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write subid-patterns.toml
        """
        config_path = Path(path)

        toml_content = f"""# Sub-ID pattern engine configuration

[render]
timestamp_unit = "{self.render.timestamp_unit}"
utc = {str(self.render.utc).lower()}

[suggestion]
fallback_length = {self.suggestion.fallback_length}
suffix_length = {self.suggestion.suffix_length}
max_attempts = {self.suggestion.max_attempts}
"""

        config_path.write_text(toml_content)


def load_default_config() -> Config:
    """Build the built-in defaults with any ``SUBID_*`` environment overrides.

    Raises:
        ConfigError: If an environment override fails validation
    """
    try:
        return Config()
    except ValidationError as e:
        raise ConfigError("environment (SUBID_* variables)", str(e)) from e
