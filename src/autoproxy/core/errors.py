"""Exceptions raised by the core and its adapters.

Every failure the CLI knows how to report derives from `AutoproxyError`;
anything else is a bug and is left to propagate with a traceback.
"""

from __future__ import annotations


class AutoproxyError(Exception):
    """Base class for user-reportable failures."""


class IpDetectionError(AutoproxyError):
    """No IPv4 address could be found among the host's addresses."""


class InputError(AutoproxyError):
    """Operator input that cannot be used."""


class MissingInputError(InputError):
    """A required prompt answer was left empty."""


class ConfigWriteError(AutoproxyError):
    """A configuration artifact could not be written or removed."""


class EncodingError(AutoproxyError):
    """The URL-encoding backend failed."""


class DependencyInstallError(AutoproxyError):
    """The system package manager could not install a dependency."""
