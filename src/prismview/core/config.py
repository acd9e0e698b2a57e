"""Configuration models for the source viewer.

Configuration

`theme` (`PrismTheme`)
: Prism stylesheet used by standalone pages. Accepts the enumeration name,
  e.g. ``OKAIDIA``.

`source_directories` (`list[PermittedSourceDirectory]`)
: Absolute directories outside of a workspace from which source files may
  be served. Entries are normalised (forward slashes, ``..`` resolved) and
  can be written as plain strings or as mappings with a ``path`` key.

Configuration files are YAML documents. Their location is, in order of
precedence, the explicit path handed to :func:`load_configuration`, the
``PRISMVIEW_CONFIG`` environment variable, ``$PRISMVIEW_HOME/config.yml``,
and ``~/.prismview/config.yml``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigurationError
from .paths import is_absolute, normalize_path


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yml"


class PrismTheme(Enum):
    """Fixed catalogue of Prism themes."""

    PRISM = "PRISM"
    COY = "COY"
    DARK = "DARK"
    FUNKY = "FUNKY"
    OKAIDIA = "OKAIDIA"
    SOLARIZED_LIGHT = "SOLARIZED_LIGHT"
    TOMORROW = "TOMORROW"
    TWILIGHT = "TWILIGHT"

    @property
    def file_name(self) -> str:
        return _THEME_METADATA[self][0]

    @property
    def title(self) -> str:
        return _THEME_METADATA[self][1]

    @classmethod
    def items(cls) -> list[tuple[str, str]]:
        """Return ``(name, title)`` pairs for selection lists."""
        return [(theme.name, theme.title) for theme in cls]


_THEME_METADATA: dict[PrismTheme, tuple[str, str]] = {
    PrismTheme.PRISM: ("prism.css", "Default"),
    PrismTheme.COY: ("prism-coy.css", "Coy"),
    PrismTheme.DARK: ("prism-dark.css", "Dark"),
    PrismTheme.FUNKY: ("prism-funky.css", "Funky"),
    PrismTheme.OKAIDIA: ("prism-okaidia.css", "Okaidia"),
    PrismTheme.SOLARIZED_LIGHT: ("prism-solarizedlight.css", "Solarized Light"),
    PrismTheme.TOMORROW: ("prism-tomorrow.css", "Tomorrow Night"),
    PrismTheme.TWILIGHT: ("prism-twilight.css", "Twilight"),
}


class PermittedSourceDirectory(BaseModel):
    """Absolute directory approved by an administrator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str

    @field_validator("path")
    @classmethod
    def _normalise(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("source directory must not be empty")
        if not is_absolute(value):
            raise ValueError(f"source directory '{value}' must be an absolute path")
        return normalize_path(value)


@dataclass(frozen=True, slots=True)
class ConfigurationSnapshot:
    """Immutable view of the configuration taken when a request starts."""

    theme: PrismTheme
    approved_directories: frozenset[str]


class Configuration(BaseModel):
    """Settings shared by the source views and the directory filter."""

    model_config = ConfigDict(extra="forbid")

    theme: PrismTheme = PrismTheme.PRISM
    source_directories: list[PermittedSourceDirectory] = Field(default_factory=list)

    @field_validator("source_directories", mode="before")
    @classmethod
    def _accept_plain_paths(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [{"path": item} if isinstance(item, str) else item for item in value]
        return value

    @field_validator("theme", mode="before")
    @classmethod
    def _accept_lowercase_theme(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper().replace("-", "_").replace(" ", "_")
        return value

    def permitted_directories(self) -> frozenset[str]:
        """Return the normalised approved directories."""
        return frozenset(directory.path for directory in self.source_directories)

    def snapshot(self) -> ConfigurationSnapshot:
        return ConfigurationSnapshot(
            theme=self.theme, approved_directories=self.permitted_directories()
        )

    def with_source_directories(self, directories: Iterable[str]) -> Configuration:
        """Return a copy approving exactly ``directories``."""
        return Configuration.model_validate(
            {"theme": self.theme, "source_directories": list(directories)}
        )

    def with_theme(self, theme: PrismTheme | str) -> Configuration:
        return Configuration.model_validate(
            {"theme": theme, "source_directories": [d.path for d in self.source_directories]}
        )

    def clear_source_directories(self) -> Configuration:
        return self.with_source_directories([])


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return the configuration file location honouring the environment."""
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get("PRISMVIEW_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    env_home = os.environ.get("PRISMVIEW_HOME")
    if env_home:
        return Path(env_home).expanduser() / CONFIG_FILE_NAME
    return Path.home() / ".prismview" / CONFIG_FILE_NAME


def load_configuration(path: str | Path | None = None) -> Configuration:
    """Load the YAML configuration file, returning defaults when it is missing."""
    target = resolve_config_path(path)
    if not target.exists():
        logger.debug("No configuration file at %s, using defaults", target)
        return Configuration()

    try:
        payload = yaml.safe_load(target.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to read configuration '{target}': {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration '{target}' must contain a mapping.")

    try:
        return Configuration.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration '{target}': {exc}") from exc


def save_configuration(configuration: Configuration, path: str | Path | None = None) -> Path:
    """Write ``configuration`` as YAML and return the file location."""
    target = resolve_config_path(path)
    payload = {
        "theme": configuration.theme.name,
        "source_directories": [directory.path for directory in configuration.source_directories],
    }
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return target


__all__ = [
    "CONFIG_FILE_NAME",
    "Configuration",
    "ConfigurationSnapshot",
    "PermittedSourceDirectory",
    "PrismTheme",
    "load_configuration",
    "resolve_config_path",
    "save_configuration",
]
