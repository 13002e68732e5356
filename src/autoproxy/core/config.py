"""Application configuration.

Settings come from `AUTOPROXY_*` environment variables and the per-user
`.env` (pydantic-settings). A `.env` in the working directory is not read:
the file paths below are written as root. The defaults describe a stock
Ubuntu guest, so the tool runs without any configuration at all.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (XDG)."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "autoproxy"
    return Path.home() / ".config" / "autoproxy"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings object shared by the CLI and the adapters."""

    model_config = SettingsConfigDict(
        env_prefix="AUTOPROXY_",
        extra="ignore",
        case_sensitive=False,
        env_file=str(get_user_env_file()),
        env_file_encoding="utf-8",
    )

    proxy_prefix: str = Field(
        default="172.17.",
        min_length=1,
        description="Address prefix that marks the mirrored network where a proxy is required.",
    )
    default_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Proxy port used when the operator leaves the port blank.",
    )
    apt_proxy_conf: Path = Field(
        default=Path("/etc/apt/apt.conf.d/95proxy"),
        description="APT configuration file holding the Acquire::*::Proxy directives.",
    )
    profile_script: Path = Field(
        default=Path("/etc/profile.d/proxy.sh"),
        description="Login shell script exporting the proxy variables.",
    )
    no_proxy: str = Field(
        default="localhost,127.0.0.1,::1",
        description="Value exported as no_proxy/NO_PROXY.",
    )
    url_encoder: Literal["urllib", "jq"] = Field(
        default="urllib",
        description="Backend used to percent-encode proxy credentials.",
    )
    use_sudo: bool = Field(
        default=True,
        description="Escalate through sudo for file writes and installs when not running as root.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level for diagnostic logging on stderr.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before the interactive flow.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
