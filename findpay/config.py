# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for the findpay parser."""
from __future__ import annotations

from datetime import date, tzinfo
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from dateutil import tz
from pydantic import BaseModel, ValidationError, field_validator

from findpay.exceptions import ConfigError
from findpay.logger import logger
from findpay.models.index import INDEX_MAX
from findpay.models.strict_date import today_in
from findpay.utils import DEFAULT_LOG_FILE, setup_logging


class FindPayConfig(BaseModel):
    """Settings that tune how command arguments are validated."""

    timezone: str | None = None
    max_index: int = INDEX_MAX
    log_mode: Literal["cli", "json"] | None = None
    log_file: str = DEFAULT_LOG_FILE

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str | None) -> str | None:
        if value is not None and tz.gettz(value) is None:
            raise ValueError(f"Unknown time zone: {value}")
        return value

    @field_validator("max_index")
    @classmethod
    def validate_max_index(cls, value: int) -> int:
        if not 1 <= value <= INDEX_MAX:
            raise ValueError(f"max_index must be between 1 and {INDEX_MAX}")
        return value

    def get_zone(self) -> tzinfo:
        if self.timezone:
            zone = tz.gettz(self.timezone)
            if zone is not None:
                return zone
        return tz.tzlocal()

    def today(self) -> date:
        return today_in(self.get_zone())

    def configure_logging(self, **kwargs: Any) -> str:
        """Run `setup_logging()` with this config's `log_mode` and `log_file`."""
        return setup_logging(self, **kwargs)


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix == ".toml":
            return toml.load(config_file)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
    raise ConfigError(f"Unsupported config file type: {path.suffix or path.name}")


def load_config(path: str | Path) -> FindPayConfig:
    """
    Load a `FindPayConfig` from a TOML or YAML file.

    Settings may sit at the top level or under a `findpay` table/key. An empty file
    yields the defaults.

    Raises:
        ConfigError: If the file is missing, unreadable, or fails validation.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = _read_raw(path)
    except (toml.TomlDecodeError, yaml.YAMLError, OSError) as error:
        logger.error("Failed to read config '%s': %s", path, error)
        raise ConfigError(f"Could not read config file '{path}': {error}") from error

    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")
    section = raw.get("findpay", raw)

    try:
        config = FindPayConfig.model_validate(section)
    except ValidationError as error:
        logger.error("Invalid config '%s': %s", path, error)
        raise ConfigError(f"Invalid config file '{path}': {error}") from error

    logger.debug("Loaded config from '%s': %s", path, config)
    return config
