"""Host address listing via `hostname -I`."""

from __future__ import annotations

import logging
import subprocess


logger = logging.getLogger(__name__)


def hostname_addresses() -> str:
    """Raw output of `hostname -I` (all assigned addresses, IPv4 and IPv6).

    A missing or failing `hostname` yields an empty listing; the caller
    treats that the same as "no IPv4 address".
    """

    try:
        completed = subprocess.run(
            ["hostname", "-I"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("hostname -I could not run: %s", exc)
        return ""
    if completed.returncode != 0:
        logger.debug("hostname -I exited with %s: %s", completed.returncode, completed.stderr.strip())
        return ""
    logger.debug("hostname -I: %s", completed.stdout.strip())
    return completed.stdout
