"""Dependency check for the URL-encoding backend."""

from __future__ import annotations

import logging
import shutil
from typing import Callable

from autoproxy.core.errors import DependencyInstallError
from autoproxy.core.interfaces import PackageInstaller, UrlEncoder


logger = logging.getLogger(__name__)


def ensure_encoder_available(
    encoder: UrlEncoder,
    *,
    installer: PackageInstaller,
    which: Callable[[str], str | None] | None = None,
    warn: Callable[[str], None] | None = None,
) -> bool:
    """Install the encoder's host command when it is missing.

    Best effort: an install failure is reported through `warn` and the
    function returns False. The run carries on and the encoder itself fails
    later if the command is still absent.
    """

    which = which or shutil.which
    command = encoder.required_command
    if command is None or which(command):
        return True

    package = encoder.package or command
    if warn:
        warn(f"{command} is not installed. Installing {package} for URL encoding...")
    try:
        installer.install(package)
    except DependencyInstallError as exc:
        if warn:
            warn(str(exc))
        else:
            logger.warning("%s", exc)
        return False
    return which(command) is not None
