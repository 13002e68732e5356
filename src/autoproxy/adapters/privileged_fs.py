"""Filesystem access for root-owned configuration files.

When the process is not root (and escalation is enabled) every mutation goes
through `sudo tee` / `sudo chmod` / `sudo rm`, so only the individual
commands run privileged. Reads are attempted as the current user first and
fall back to `sudo cat` for root-only files. As root, or with escalation
disabled, plain `pathlib` operations are used instead.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from autoproxy.core.errors import ConfigWriteError


logger = logging.getLogger(__name__)


def is_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


class SudoFileWriter:
    """`PrivilegedFileWriter` backed by sudo."""

    def __init__(self, *, use_sudo: bool = True) -> None:
        self._escalate = use_sudo and not is_root()

    @property
    def escalates(self) -> bool:
        return self._escalate

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except PermissionError as exc:
            if not self._escalate:
                raise ConfigWriteError(f"Could not read {path}: {exc}") from exc
            # Root-only file, e.g. mode 600 because it holds the proxy password.
            return self._sudo(["cat", str(path)])
        except OSError as exc:
            raise ConfigWriteError(f"Could not read {path}: {exc}") from exc

    def write_text(self, path: Path, content: str) -> None:
        if self._escalate:
            self._sudo(["tee", str(path)], stdin=content)
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigWriteError(f"Could not write {path}: {exc}") from exc

    def make_executable(self, path: Path) -> None:
        if self._escalate:
            self._sudo(["chmod", "+x", str(path)])
            return
        try:
            path.chmod(path.stat().st_mode | 0o111)
        except OSError as exc:
            raise ConfigWriteError(f"Could not mark {path} executable: {exc}") from exc

    def remove(self, path: Path) -> None:
        if self._escalate:
            self._sudo(["rm", "-f", str(path)])
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise ConfigWriteError(f"Could not remove {path}: {exc}") from exc

    def _sudo(self, args: list[str], *, stdin: str | None = None) -> str:
        command = ["sudo", *args]
        # Never log `stdin`: it carries the encoded credentials.
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                input=stdin,
                text=True,
                encoding="utf-8",
                stdout=subprocess.DEVNULL if stdin is not None else subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
            )
        except FileNotFoundError as exc:
            raise ConfigWriteError("sudo is not available; run autoproxy as root") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise ConfigWriteError(f"'{' '.join(command)}' failed: {detail}") from exc
        return completed.stdout or ""
