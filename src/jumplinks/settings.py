"""Persisted module settings and their versioned defaults."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .consts import SCHEMA_VERSION
from .enums import WildcardCleaning
from .errors import ConfigException

logger = logging.getLogger(__name__)


class ModuleSettings(BaseModel):
    """Settings persisted by the host, keyed by their camelCase names.

    Field order is the order of ``get_defaults()``. Renaming a key requires
    a new schema version.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_version: int = Field(default=SCHEMA_VERSION, alias="_schemaVersion")
    enhanced_wildcard_cleaning: bool = Field(default=False, alias="enhancedWildcardCleaning")
    legacy_domain: str = Field(default="", alias="legacyDomain")
    enable_404_monitor: bool = Field(default=False, alias="enable404Monitor")
    disable_index_php_matching: bool = Field(default=False, alias="disableIndexPhpMatching")
    module_debug: bool = Field(default=False, alias="moduleDebug")
    redirects_imported: bool = Field(default=False, alias="redirectsImported")
    # Space-delimited HTTP status codes, deliberately not validated here
    status_codes: str = Field(default="200 301 302", alias="statusCodes")
    wildcard_cleaning: WildcardCleaning = Field(
        default=WildcardCleaning.FULL_CLEAN, alias="wildcardCleaning"
    )

    def to_persisted(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# Every schema version ever released. Versions are never reused.
SCHEMAS: dict[int, type[ModuleSettings]] = {
    1: ModuleSettings,
}


def get_defaults(schema_version: int = SCHEMA_VERSION) -> dict[str, Any]:
    """Return the default settings mapping for a schema version.

    Args:
        schema_version: Released schema version, the current one by default

    Returns:
        A fresh dict of persisted setting name to default value

    Raises:
        ConfigException: If the schema version was never released
    """
    try:
        schema = SCHEMAS[schema_version]
    except KeyError:
        raise ConfigException(f"Unknown settings schema version: {schema_version}") from None

    return schema().to_persisted()


def format_validation_error(e: ValidationError, header: str = "Settings validation failed:") -> str:
    lines = [header]
    for error in e.errors():
        loc = " -> ".join(str(item) for item in error.get("loc", []))
        msg = error.get("msg", "")
        lines.append(f"  - {loc}: {msg}" if loc else f"  - {msg}")
    return "\n".join(lines)


def canonical_setting_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    """Rename keys to their persisted camelCase spelling.

    Accepts field names and keys whose case was lost (environment variables
    arrive lower-cased). When two keys land on the same setting, the later
    one wins. Unrecognised keys are kept as they are.
    """
    spellings: dict[str, str] = {}
    for name, field in ModuleSettings.model_fields.items():
        persisted_key = field.alias or name
        spellings[persisted_key.lower()] = persisted_key
        spellings[name.lower()] = persisted_key

    return {spellings.get(key.lower(), key): value for key, value in values.items()}


def merge_settings(persisted: Mapping[str, Any] | None = None) -> ModuleSettings:
    """Overlay persisted values on the current defaults.

    Keys are matched case-insensitively, by persisted name or field name.
    Unknown keys are dropped. Only types and the wildcard cleaning mode are
    checked; legacy domain and status codes pass through as given.

    Raises:
        ConfigException: If a persisted value has the wrong type
    """
    values = canonical_setting_keys(persisted or {})
    known = set(get_defaults())
    ignored = [k for k in values if k not in known]
    if ignored:
        logger.debug(f"Ignoring unknown persisted settings: {', '.join(ignored)}")

    try:
        return ModuleSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigException(format_validation_error(e)) from e
