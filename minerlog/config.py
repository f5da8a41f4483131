"""Shared configuration primitives for the minerlog package."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar
import tomllib

from pydantic import BaseModel, ConfigDict, field_validator

from .const import DEFAULT_STORAGE_DIR


class BaseConfig(BaseModel):
    """Base config with strict validation rules."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_toml(cls: "type[C]", path: Path) -> "C":
        """Construct the config object from a TOML file."""
        data = _load_toml(path)
        return cls.model_validate(data)


C = TypeVar("C", bound="BaseConfig")


def load_config(config_cls: type[C], path: Path) -> C:
    """Parse the given TOML file into the provided config class."""
    return config_cls.from_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    if not isinstance(data, dict):
        raise ValueError("Root TOML value must be a table")
    return data


__all__ = ["BaseConfig", "load_config"]


class StorageConfig(BaseConfig):
    """Location of the receipts/errors log files."""

    dir: Path = DEFAULT_STORAGE_DIR

    def resolve_dir(self, cwd: Path | None = None) -> Path:
        """Return the storage directory, anchoring relative paths at ``cwd``."""
        if self.dir.is_absolute():
            return self.dir
        return (cwd or Path.cwd()) / self.dir


class LoggingConfig(BaseConfig):
    """Diagnostic output settings."""

    level: str = "INFO"
    file: Path | None = None

    @field_validator("level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseConfig):
    """Application configuration."""

    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()


__all__ += [
    "StorageConfig",
    "LoggingConfig",
    "AppConfig",
]
