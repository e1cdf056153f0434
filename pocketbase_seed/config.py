"""
Configuration management for pocketbase-seed.

Loads connection settings for the target PocketBase instance from a YAML,
JSON or TOML file using Pydantic. Environment variables take precedence
over values read from the file.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from pocketbase_seed.exceptions import ConfigError

ENV_PREFIX = "POCKETBASE_"


def load_document(path: Path) -> Any:
    """
    Parse a YAML, JSON or TOML document based on its extension.

    Raises:
        ValueError: If the extension is not supported
        OSError: If the file cannot be read
    """
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)

    raise ValueError(f"unsupported file extension '{suffix}'")


class Config(BaseSettings):
    """Connection settings for the target PocketBase instance."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, frozen=True, coerce_numbers_to_str=True
    )

    url: str = Field(description="Base URL of the PocketBase instance, without /api")
    email: str = Field(description="Superuser email")
    password: str = Field(description="Superuser password", repr=False)

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment overrides the config file
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_file(cls, path: Path | str) -> Config:
        """
        Load configuration from a YAML, JSON or TOML file.

        Args:
            path: Path to the config file

        Returns:
            Config instance

        Raises:
            ConfigError: If the file is missing, unparsable or incomplete
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(str(config_path), "file not found")

        try:
            data = load_document(config_path)
        except (OSError, ValueError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(str(config_path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(str(config_path), "expected a mapping at the top level")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(config_path), str(e)) from e
