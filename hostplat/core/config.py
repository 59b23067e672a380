"""Typed loading of the optional hostplat config file.

The file is plain TOML with a single ``[properties]`` table. Each entry
supplies the value of a host property the way the environment would, which
is mostly useful for describing a machine other than the current one. The
file replaces the live host entirely: a property it leaves out reads as
"unknown" rather than falling back to this machine's value.

    [properties]
    "os.name" = "SunOS"
    "os.arch" = "x86"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_table

__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "ConfigError",
    "load_config",
]

CONFIG_ENV_VAR = "HOSTPLAT_CONFIG"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    not_found: bool = False


def _empty_properties() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Parsed config file."""

    properties: dict[str, str] = field(default_factory=_empty_properties)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            ValueError: if a property value is not a string.
        """
        table: StrDict = get_table(data, "properties") or {}
        properties: dict[str, str] = {}
        for name, value in table.items():
            if not isinstance(value, str):
                raise ValueError(f"property {name!r} must be a string, got {type(value).__name__}")
            properties[name] = value
        return cls(properties=properties)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path, not_found=True))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse a config file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))

