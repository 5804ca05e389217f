"""Connection profile loading helpers."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Literal

import tomllib

from pydantic import BaseModel, Field

from .database import ConnectionConfig
from .errors import ProfileError
from .models import DEFAULT_PORT, UnixSocketAddress
from .transport import TransportConfig

LOG = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".config" / "pgconnect" / "config.toml"

SslMode = Literal["disable", "require", "verify-full"]

_STRING_KEYS = ("name", "url", "host", "socket_path", "user", "database", "password", "sslmode", "sslrootcert")

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


class ConnectionProfileConfig(BaseModel):
    """Connection profile stored in config.toml."""

    name: str
    url: str | None = None
    host: str | None = None
    port: int | None = None
    socket_path: str | None = None
    user: str | None = None
    database: str | None = None
    password: str | None = Field(default=None, repr=False)
    sslmode: SslMode = "disable"
    sslrootcert: str | None = None

    def transport(self) -> TransportConfig:
        """Map libpq-style ``sslmode``/``sslrootcert`` onto a transport."""

        if self.sslrootcert:
            return TransportConfig.root_certificate(self.sslrootcert)
        if self.sslmode == "require":
            return TransportConfig.unverified_tls()
        if self.sslmode == "verify-full":
            return TransportConfig.full_verification()
        return TransportConfig.cleartext()

    def to_connection_config(self) -> ConnectionConfig:
        """Build the runtime config; ``url`` wins over the discrete fields."""

        transport = self.transport()
        if self.url:
            return ConnectionConfig.from_url(self.url, transport)
        if not self.user:
            raise ProfileError(f"Profile '{self.name}' does not define a user")
        if self.socket_path:
            return ConnectionConfig(
                UnixSocketAddress(self.socket_path),
                self.user,
                database=self.database,
                password=self.password,
                transport=transport,
            )
        return ConnectionConfig.from_host_port(
            self.host or "localhost",
            self.port if self.port is not None else DEFAULT_PORT,
            username=self.user,
            database=self.database,
            password=self.password,
            transport=transport,
        )


class AppConfig(BaseModel):
    """Shape of the configuration file."""

    profiles: list[ConnectionProfileConfig] = Field(default_factory=lambda: list(_default_profiles()))
    active_profile: str | None = None

    def profile(self, name: str | None = None) -> ConnectionProfileConfig:
        """Return the named profile, the active one, or the first one."""

        target = name or self.active_profile
        if target is None:
            if not self.profiles:
                raise ProfileError("No connection profiles configured")
            return self.profiles[0]
        for profile in self.profiles:
            if profile.name == target:
                return profile
        raise ProfileError(f"Unknown connection profile '{target}'")

    def with_active_profile(self, name: str) -> AppConfig:
        """Return a copy with the active profile updated."""

        return self.model_copy(update={"active_profile": name})


def load_config() -> AppConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, OSError) as exc:
        LOG.warning("Ignoring unreadable config file", extra={"path": str(CONFIG_FILE), "error": str(exc)})
        return AppConfig()

    profiles_data = data.get("profiles")
    profiles: list[ConnectionProfileConfig] | None = None
    if isinstance(profiles_data, list):
        profiles = [
            ConnectionProfileConfig(**profile)
            for profile in profiles_data  # type: ignore[list-item]
            if isinstance(profile, dict)
        ]

    return AppConfig(
        profiles=profiles if profiles is not None else list(_default_profiles()),
        active_profile=data.get("active_profile"),
    )


def save_config(config: AppConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    if config.active_profile:
        lines.append(f"active_profile = {_toml_string(config.active_profile)}")
        lines.append("")
    for profile in config.profiles:
        lines.append("[[profiles]]")
        lines.append(f"name = {_toml_string(profile.name)}")
        for key in ("url", "host", "socket_path", "user", "database", "password", "sslrootcert"):
            value = getattr(profile, key)
            if value:
                lines.append(f"{key} = {_toml_string(value)}")
        if profile.port is not None:
            lines.append(f"port = {profile.port}")
        if profile.sslmode != "disable":
            lines.append(f'sslmode = "{profile.sslmode}"')
        lines.append("")
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _toml_string(value: str) -> str:
    """Quote ``value`` as a TOML basic string."""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = _CONTROL_CHARACTERS.sub(lambda match: f"\\u{ord(match.group()):04x}", escaped)
    return f'"{escaped}"'


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    active_profile = raw.get("active_profile")
    if isinstance(active_profile, str):
        data["active_profile"] = active_profile
    profiles = raw.get("profiles")
    if isinstance(profiles, list):
        parsed_profiles: list[dict[str, object]] = []
        for profile in profiles:
            if not isinstance(profile, dict):
                continue
            parsed: dict[str, object] = {}
            for key in _STRING_KEYS:
                value = profile.get(key)
                if isinstance(value, str):
                    parsed[key] = value
            port = profile.get("port")
            if isinstance(port, int):
                parsed["port"] = port
            if parsed.get("sslmode") not in (None, "disable", "require", "verify-full"):
                LOG.warning("Ignoring unknown sslmode", extra={"profile": parsed.get("name")})
                parsed.pop("sslmode")
            if parsed.get("name"):
                parsed_profiles.append(parsed)
        if parsed_profiles:
            data["profiles"] = parsed_profiles
    return data


def _default_profiles() -> tuple[ConnectionProfileConfig, ...]:
    """Profile used before config.toml is customized."""

    return (
        ConnectionProfileConfig(
            name="Local",
            host="localhost",
            port=DEFAULT_PORT,
            database="postgres",
            user="postgres",
        ),
    )


__all__ = [
    "AppConfig",
    "CONFIG_FILE",
    "ConnectionProfileConfig",
    "load_config",
    "save_config",
]
