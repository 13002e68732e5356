"""APT-based package installer."""

from __future__ import annotations

import logging
import subprocess

from autoproxy.adapters.privileged_fs import is_root
from autoproxy.core.errors import DependencyInstallError


logger = logging.getLogger(__name__)


class AptInstaller:
    """`PackageInstaller` running `apt-get update` then `apt-get install -y`.

    Output is left attached to the terminal so the operator sees apt's
    progress and any sudo password prompt.
    """

    def __init__(self, *, use_sudo: bool = True) -> None:
        self._prefix = ["sudo"] if use_sudo and not is_root() else []

    def install(self, package: str) -> None:
        for args in (["apt-get", "update", "-qq"], ["apt-get", "install", "-y", package]):
            command = [*self._prefix, *args]
            logger.debug("Running %s", " ".join(command))
            try:
                subprocess.run(command, check=True)
            except (OSError, subprocess.CalledProcessError) as exc:
                raise DependencyInstallError(f"Could not install {package}: {exc}") from exc
