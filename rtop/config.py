"""Loading and saving of the monitor's configuration."""

from __future__ import annotations

import sys
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

CONFIG_EXTENSIONS = ("toml", "yaml", "yml")
FALLBACK_PATH = Path("pkg/config.yaml")


class ConfigError(ValueError):
    """Raised when configuration data does not have the expected shape."""


def _get(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing field `{key}`{where}")
    return data[key]


def _bool(data: Mapping[str, Any], key: str, where: str = "") -> bool:
    value = _get(data, key, where)
    if not isinstance(value, bool):
        raise ConfigError(f"field `{key}`{where} must be a boolean")
    return value


def _str(data: Mapping[str, Any], key: str, where: str = "") -> str:
    value = _get(data, key, where)
    if not isinstance(value, str):
        raise ConfigError(f"field `{key}`{where} must be a string")
    return value


def _unsigned(data: Mapping[str, Any], key: str, where: str = "") -> int:
    value = _get(data, key, where)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"field `{key}`{where} must be a non-negative integer")
    return value


def _str_list(data: Mapping[str, Any], key: str, where: str = "") -> list[str]:
    value = _get(data, key, where)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"field `{key}`{where} must be a list of strings")
    return list(value)


@dataclass
class LayoutConfig:
    """Which panels the default view shows."""

    show_cpu: bool = True
    show_memory: bool = True
    show_network: bool = True
    show_disk: bool = True
    show_process_details: bool = True


def _layout_from_dict(data: Any) -> LayoutConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("field `layout` must be a table")
    where = " in `layout`"
    return LayoutConfig(
        show_cpu=_bool(data, "show_cpu", where),
        show_memory=_bool(data, "show_memory", where),
        show_network=_bool(data, "show_network", where),
        show_disk=_bool(data, "show_disk", where),
        show_process_details=_bool(data, "show_process_details", where),
    )


@dataclass
class Config:
    """Runtime settings: refresh interval, theme, layout and sorting."""

    update_interval: int = 1000
    theme: str = "default"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    sort_by: str = "cpu"
    filters: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration in which every field must be present."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a table")
        return cls(
            update_interval=_unsigned(data, "update_interval"),
            theme=_str(data, "theme"),
            layout=_layout_from_dict(_get(data, "layout", "")),
            sort_by=_str(data, "sort_by"),
            filters=_str_list(data, "filters"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as plain nested data."""
        return asdict(self)

    @classmethod
    def _parse(cls, content: str) -> Config:
        return cls.from_dict(tomllib.loads(content))

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load from ``path``, then the user config directory, else defaults."""
        if path is not None and Path(path).exists():
            try:
                content = Path(path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error reading config file: {exc}", file=sys.stderr)
            else:
                try:
                    return cls._parse(content)
                except (tomllib.TOMLDecodeError, ConfigError) as exc:
                    print(f"Error parsing config file: {exc}", file=sys.stderr)

        config_dir = Path(platformdirs.user_config_path())
        for ext in CONFIG_EXTENSIONS:
            candidate = config_dir / "rtop" / f"config.{ext}"
            if not candidate.exists():
                continue
            try:
                content = candidate.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error reading config at {str(candidate)!r}: {exc}", file=sys.stderr)
                continue
            if ext == "toml":
                try:
                    return cls._parse(content)
                except (tomllib.TOMLDecodeError, ConfigError):
                    pass

        if FALLBACK_PATH.exists():
            print("Using pkg/config.yaml as fallback", file=sys.stderr)

        return cls()

    def save(self, path: str | Path) -> None:
        """Write the configuration to ``path`` as TOML."""
        Path(path).write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")