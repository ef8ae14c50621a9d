"""Configuration file loading, validation and saving."""

import logging
import shutil
from pathlib import Path
from typing import Any, List

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)
import tomlkit
from tomlkit.exceptions import ParseError

from .consts import CONFIG_TABLE, ENV_PREFIX
from .errors import ConfigException
from .settings import (
    ModuleSettings,
    canonical_setting_keys,
    format_validation_error,
    merge_settings,
)

logger = logging.getLogger(__name__)


class WebConfig(BaseModel):
    """Web service configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, ge=1, le=65535)
    reload: bool = Field(default=False)


class HostConfig(BaseModel):
    """What the admin host provides to the settings page."""

    module_url: str = Field(default="/site/modules/ProcessJumplinks/")
    installed_modules: List[str] = Field(default_factory=list)

    @field_validator("installed_modules", mode="before")
    @classmethod
    def split_module_names(cls, v):
        if isinstance(v, str):
            return [name for name in v.replace(",", " ").split() if name]
        return v


class PersistedSettingsEnvSource(EnvSettingsSource):
    """Environment source that keeps persisted setting keys camelCase.

    Nested environment keys arrive lower-cased, so without this an override
    such as JUMPLINKS_JUMPLINKS__moduleDebug would not replace the file value.
    """

    def __call__(self) -> dict[str, Any]:
        data = super().__call__()
        table = data.get(CONFIG_TABLE)
        if isinstance(table, dict):
            data[CONFIG_TABLE] = canonical_setting_keys(table)
        return data


class Config(BaseSettings):
    """Application configuration."""

    language: str = Field(default="en")
    data_dir: str = Field(default="data")

    web: WebConfig = Field(default_factory=WebConfig)
    host: HostConfig = Field(default_factory=HostConfig)
    # Persisted module settings, camelCase keys as stored by the host
    jumplinks: dict[str, Any] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            PersistedSettingsEnvSource(settings_cls),
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter="__",
            )

        try:
            config = _Config()
        except ValidationError as e:
            raise ConfigException(
                format_validation_error(e, "Configuration validation failed:")
            ) from e

        # Surface bad persisted settings at load time rather than on first render
        config.settings()
        return config

    def settings(self) -> ModuleSettings:
        return merge_settings(self.jumplinks)


def save_settings(config_path: str, settings: ModuleSettings) -> str:
    """Replace the persisted settings table, keeping the rest of the file.

    Returns:
        The TOML text that was written
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigException(f"Configuration file not found: {config_path}")

    try:
        doc = tomlkit.loads(path.read_text(encoding="utf-8"))
    except ParseError as e:
        raise ConfigException(f"Invalid TOML syntax: {e}") from e

    if CONFIG_TABLE not in doc:
        doc[CONFIG_TABLE] = tomlkit.table()

    table = doc[CONFIG_TABLE]
    for key, value in settings.to_persisted().items():
        table[key] = value

    content = tomlkit.dumps(doc)
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(content, encoding="utf-8")
    shutil.move(str(temp_path), str(path))

    logger.info(f"Saved Jumplinks settings to {config_path}")
    return content
