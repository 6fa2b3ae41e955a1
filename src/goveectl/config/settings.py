from __future__ import annotations

import json
import os
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, Field, ValidationError, field_validator

APP_NAME = "goveectl"
CONFIG_ENV_VAR = "GOVEECTL_CONFIG"
DEVICES_ENV_VAR = "GOVEECTL_DEVICES"

HEX_COLOR_RE = re.compile(r"[0-9a-f]{6}")
BARE_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")

DEFAULT_PALETTE = MappingProxyType(
    {
        "red": "ff0000",
        "green": "00ff00",
        "blue": "0000ff",
        "white": "ffffff",
        "warm": "ff7722",
        "cool": "aaccff",
        "purple": "aa00ff",
        "orange": "ff5500",
        "yellow": "ffff00",
        "cyan": "00ffff",
        "pink": "ff55aa",
    }
)


def _expand(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))


def _xdg_home(variable: str, *fallback: str) -> Path:
    base = os.environ.get(variable) or Path.home().joinpath(*fallback)
    return Path(base) / APP_NAME


def default_registry_path() -> Path:
    return _xdg_home("XDG_DATA_HOME", ".local", "share") / "devices.json"


class RegistryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_registry_path()))


class ProtocolConfig(BaseModel):
    """UDP endpoints of the LAN control protocol."""

    model_config = {"frozen": True, "extra": "forbid"}

    control_port: int = Field(default=4003, ge=1, le=65535)
    scan_port: int = Field(default=4001, ge=1, le=65535)
    listen_port: int = Field(default=4002, ge=1, le=65535)
    broadcast_address: str = "255.255.255.255"


class DiscoveryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    receive_timeout: float = Field(default=3.0, gt=0)
    session_timeout: float = Field(default=10.0, gt=0)
    buffer_size: int = Field(default=4096, ge=512, le=65535)


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    protocol: ProtocolConfig = Field(default_factory=ProtocolConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    colors: dict[str, str] = Field(default_factory=dict)

    @field_validator("colors")
    @classmethod
    def _normalize_colors(cls, value: dict[str, str]) -> dict[str, str]:
        normalized: dict[str, str] = {}
        for name, code in value.items():
            cleaned = code.strip().lower().removeprefix("#")
            if not HEX_COLOR_RE.fullmatch(cleaned):
                raise ValueError(f"color '{name}' must be 6 hex digits, got {code!r}")
            normalized[name.strip().lower()] = cleaned
        return normalized

    @property
    def palette(self) -> dict[str, str]:
        return {**DEFAULT_PALETTE, **self.colors}


def config_path() -> Path:
    """Settings file location: ``$GOVEECTL_CONFIG`` or the XDG config dir."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _expand(env_path)
    return _xdg_home("XDG_CONFIG_HOME", ".config") / "config.toml"


def load_settings(path: Path) -> Settings:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(data)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path = config_path()
    if path.exists():
        return load_settings(path)
    if os.environ.get(CONFIG_ENV_VAR):
        raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
    # no settings file: built-in defaults
    return Settings()


def registry_path_from_settings(settings: Settings) -> Path:
    return _expand(os.environ.get(DEVICES_ENV_VAR) or settings.registry.path)


def _toml_key(key: str) -> str:
    return key if BARE_KEY_RE.fullmatch(key) else json.dumps(key)


def render_settings_toml(settings: Settings) -> str:
    lines = ["# goveectl configuration"]
    for section, values in settings.model_dump().items():
        lines += ["", f"[{section}]"]
        # JSON scalars are valid TOML values for strings, ints and floats
        lines += [
            f"{_toml_key(key)} = {json.dumps(value)}" for key, value in values.items()
        ]
    lines.append("")
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings), encoding="utf-8")
