"""Contracts (Protocol) implemented by the adapters.

The core depends on these abstractions so tests can swap sudo, apt and the
terminal for scripted fakes.
"""

from autoproxy.core.interfaces.system import (
    AddressPolicy,
    AddressSource,
    PackageInstaller,
    PrivilegedFileWriter,
    Prompter,
    UrlEncoder,
)

__all__ = [
    "AddressPolicy",
    "AddressSource",
    "PackageInstaller",
    "PrivilegedFileWriter",
    "Prompter",
    "UrlEncoder",
]
