"""Domain models (Pydantic v2 and dataclasses).

`ProxyDescriptor` is the only entity: it is built from prompt answers,
rendered into the artifacts and then dropped. The remaining types are value
objects that carry side effects back to the caller instead of applying them.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr, model_validator
from pydantic.config import ConfigDict


LOWERCASE_PROXY_VARS: tuple[str, ...] = ("http_proxy", "https_proxy", "ftp_proxy", "no_proxy")
PROXY_ENV_VARS: tuple[str, ...] = LOWERCASE_PROXY_VARS + tuple(
    name.upper() for name in LOWERCASE_PROXY_VARS
)


class ProxyDescriptor(BaseModel):
    """Proxy endpoint entered by the operator."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        ...,
        min_length=1,
        description="Proxy host name or IP address.",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Proxy TCP port.",
    )
    username: str | None = Field(
        default=None,
        description="Proxy account name (plain text, encoded when rendered).",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Proxy account password.",
    )

    @model_validator(mode="after")
    def _credentials_come_in_pairs(self) -> "ProxyDescriptor":
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be given together")
        return self

    @property
    def has_credentials(self) -> bool:
        return self.username is not None and self.password is not None


@dataclass(frozen=True)
class EnvironmentChange:
    """Environment variables to set and unset in the current process.

    Services return this instead of touching `os.environ`; the CLI decides
    when to `apply` it.
    """

    assignments: dict[str, str] = field(default_factory=dict)
    removals: tuple[str, ...] = ()

    def apply(self, environ: MutableMapping[str, str] | None = None) -> None:
        target = os.environ if environ is None else environ
        for name in self.removals:
            target.pop(name, None)
        for name, value in self.assignments.items():
            target[name] = value

    @property
    def is_empty(self) -> bool:
        return not self.assignments and not self.removals


@dataclass(frozen=True)
class ProxyArtifacts:
    """Rendered contents of the two configuration files."""

    apt_conf: str
    profile_script: str


@dataclass(frozen=True)
class WriteResult:
    authority: str
    apt_conf_path: Path
    profile_script_path: Path
    environment: EnvironmentChange


@dataclass(frozen=True)
class RemovalResult:
    removed: list[Path]
    environment: EnvironmentChange
