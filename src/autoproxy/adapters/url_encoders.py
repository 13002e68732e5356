"""URL-encoding backends for proxy credentials.

Both backends percent-encode every byte outside the URI unreserved set
(`A-Z a-z 0-9 - _ . ~`), UTF-8 first, so `a b` becomes `a%20b` and `p@ss`
becomes `p%40ss` whichever one is configured.
"""

from __future__ import annotations

import logging
import subprocess
from urllib.parse import quote

from autoproxy.core.errors import EncodingError
from autoproxy.core.interfaces import UrlEncoder


logger = logging.getLogger(__name__)


class UrllibEncoder:
    """In-process encoder (standard library, nothing to install)."""

    name = "urllib"
    required_command: str | None = None
    package: str | None = None

    def encode(self, value: str) -> str:
        return quote(value, safe="")


class JqEncoder:
    """Encoder backed by `jq -sRr @uri`, for hosts that standardize on jq."""

    name = "jq"
    required_command: str | None = "jq"
    package: str | None = "jq"

    def encode(self, value: str) -> str:
        logger.debug("Encoding a credential with jq")
        try:
            completed = subprocess.run(
                ["jq", "-sRr", "@uri"],
                input=value,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except FileNotFoundError as exc:
            raise EncodingError("jq is not installed; cannot URL-encode credentials") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise EncodingError(f"jq failed to URL-encode credentials: {detail}") from exc
        # jq -r terminates its output with a newline; a literal newline in
        # the input is encoded as %0A, so stripping it is lossless.
        return completed.stdout.rstrip("\n")


_ENCODERS: dict[str, type[UrllibEncoder] | type[JqEncoder]] = {
    UrllibEncoder.name: UrllibEncoder,
    JqEncoder.name: JqEncoder,
}


def build_encoder(name: str) -> UrlEncoder:
    try:
        return _ENCODERS[name]()
    except KeyError:
        raise ValueError(f"unknown URL encoder: {name!r}") from None
