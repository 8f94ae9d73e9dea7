from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    levels: tuple[str, ...] = ()
    noprefix: bool = False
    dateformat: str = Defaults.DATEFORMAT

    def __post_init__(self) -> None:
        if not self.dateformat:
            raise ValueError("dateformat must not be empty")
        for level in self.levels:
            if not isinstance(level, str) or not level:
                raise ValueError(f"levels must be non-empty strings, got {level!r}")

    @classmethod
    def from_env(cls) -> LoggerConfig:
        raw_levels = os.getenv(EnvVars.LEVELS, "")
        levels = tuple(part.strip() for part in raw_levels.split(",") if part.strip())
        raw_noprefix = os.getenv(EnvVars.NOPREFIX, "")
        return cls(
            levels=levels,
            noprefix=raw_noprefix.strip().lower() in EnvVars.TRUTHY,
            dateformat=os.getenv(EnvVars.DATEFORMAT) or Defaults.DATEFORMAT,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> LoggerConfig:
        config = LoggerConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: LoggerConfig) -> LoggerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        section = _get_table(data, Defaults.CONFIG_TABLE)
        levels = base_config.levels
        if (value := section.get("levels")) is not None:
            levels = _coerce_levels(value, key=f"{Defaults.CONFIG_TABLE}.levels")
        noprefix = base_config.noprefix
        if (value := section.get("noprefix")) is not None:
            noprefix = _coerce_bool(value, key=f"{Defaults.CONFIG_TABLE}.noprefix")
        dateformat = base_config.dateformat
        if (value := section.get("dateformat")) is not None:
            dateformat = str(value)
        return LoggerConfig(levels=levels, noprefix=noprefix, dateformat=dateformat)


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_levels(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(item) for item in cast("list[object]", value))
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in EnvVars.TRUTHY
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")
