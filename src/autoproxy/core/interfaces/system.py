"""Host capabilities needed by the proxy workflow.

Why Protocol:
- Structural contracts, no inheritance required from adapters or fakes.
- Privilege escalation and terminal I/O stay outside the core logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable


AddressSource = Callable[[], str]
"""Returns the raw, whitespace separated list of the host's addresses."""


@runtime_checkable
class AddressPolicy(Protocol):
    """Decides whether an IPv4 address needs the proxy configuration."""

    def __call__(self, address: str) -> bool:
        ...


@runtime_checkable
class Prompter(Protocol):
    """Interactive question/answer capability."""

    def prompt_line(self, question: str, default: str = "") -> str:
        """Ask a visible question; an empty answer yields `default`."""

        ...

    def prompt_secret(self, question: str) -> str:
        """Ask a question without echoing the answer."""

        ...


@runtime_checkable
class PrivilegedFileWriter(Protocol):
    """Filesystem access for root-owned configuration files.

    Implementations raise `ConfigWriteError` when an operation fails.
    """

    @property
    def escalates(self) -> bool:
        """True when mutations run through a privilege escalation helper."""

        ...

    def exists(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> str | None:
        """Current content of `path`, or None when it does not exist."""

        ...

    def write_text(self, path: Path, content: str) -> None:
        ...

    def make_executable(self, path: Path) -> None:
        ...

    def remove(self, path: Path) -> None:
        """Delete `path`; a missing file is not an error."""

        ...


@runtime_checkable
class PackageInstaller(Protocol):
    """System package manager. Raises `DependencyInstallError` on failure."""

    def install(self, package: str) -> None:
        ...


@runtime_checkable
class UrlEncoder(Protocol):
    """Percent-encodes a URI component.

    `required_command` names the host command the backend shells out to
    (None for in-process backends) and `package` the system package that
    provides it.
    """

    name: str
    required_command: str | None
    package: str | None

    def encode(self, value: str) -> str:
        ...
