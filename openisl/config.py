"""User settings stored as TOML."""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

APP_NAME = "openisl"
ENV_PREFIX = "OPENISL"
_LOCAL_FILE = "openisl.toml"

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


@dataclass
class GeneralConfig:
    """Settings that apply everywhere."""

    max_commits: int = 100
    date_format: str = "%Y-%m-%d %H:%M:%S UTC"
    verbose: bool = False


@dataclass
class TuiConfig:
    """Settings of the interactive interface."""

    theme: str = "dark"
    page_size: int = 20
    show_help_on_start: bool = False


@dataclass
class GitConfig:
    """Settings for talking to git remotes."""

    auto_fetch: bool = False
    fetch_remotes: bool = False


_SECTIONS: dict[str, type] = {
    "general": GeneralConfig,
    "tui": TuiConfig,
    "git": GitConfig,
}


def config_path() -> Path:
    """Return where the user configuration file lives."""
    return platformdirs.user_config_path(APP_NAME, appauthor=False) / "config.toml"


def _coerce(value: Any, kind: str, key: str) -> Any:
    if kind == "bool":
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
        raise ValueError(f"invalid type for `{key}`: expected a boolean")
    if kind == "int":
        if isinstance(value, bool):
            raise ValueError(f"invalid type for `{key}`: expected an integer")
        if isinstance(value, str):
            text = value.strip()
            if not (text.isascii() and text.isdigit()):
                raise ValueError(f"invalid value for `{key}`: {value!r}")
            value = int(text)
        if not isinstance(value, int):
            raise ValueError(f"invalid type for `{key}`: expected an integer")
        if value < 0:
            raise ValueError(f"invalid value for `{key}`: must not be negative")
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"invalid type for `{key}`: expected a string")


def _build_section(section_cls: type, data: Any, name: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"invalid type for `{name}`: expected a table")
    values = {}
    for item in fields(section_cls):
        if item.name not in data:
            raise ValueError(f"missing field `{item.name}` in `{name}`")
        values[item.name] = _coerce(data[item.name], str(item.type), f"{name}.{item.name}")
    return section_cls(**values)


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        elif isinstance(value, dict):
            target[key] = {}
            _merge(target[key], value)
        else:
            target[key] = value


def _environment_values() -> dict[str, Any]:
    prefix = f"{ENV_PREFIX.lower()}_"
    values: dict[str, Any] = {}
    for key, value in os.environ.items():
        lowered = key.lower()
        if not lowered.startswith(prefix) or len(lowered) == len(prefix):
            continue
        *parents, leaf = lowered[len(prefix):].split("_")
        node = values
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = value
    return values


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


@dataclass
class Config:
    """All settings, grouped by section."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    tui: TuiConfig = field(default_factory=TuiConfig)
    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def _from_mapping(cls, data: dict[str, Any]) -> Config:
        sections = {}
        for name, section_cls in _SECTIONS.items():
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            sections[name] = _build_section(section_cls, data[name], name)
        return cls(**sections)

    def to_toml(self) -> str:
        """Serialise the settings as TOML."""
        return tomli_w.dumps(asdict(self))

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Read settings from TOML text; every field must be present."""
        return cls._from_mapping(tomllib.loads(text))

    @classmethod
    def load(cls) -> Config:
        """Merge ``openisl.toml`` in the working directory, the environment and the user file."""
        merged: dict[str, Any] = {}
        local = Path.cwd() / _LOCAL_FILE
        if local.is_file():
            _merge(merged, _read_toml(local))
        _merge(merged, _environment_values())
        path = config_path()
        if path.exists():
            _merge(merged, _read_toml(path))
        try:
            return cls._from_mapping(merged)
        except ValueError as exc:
            exc.add_note("Failed to deserialize config")
            raise

    def save(self) -> None:
        """Write the settings to the user configuration file."""
        path = config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_toml(), encoding="utf-8")