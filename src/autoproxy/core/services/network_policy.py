"""IP detection and the proxy policy.

In WSL2 mirrored mode the guest shares the host's addresses, so the corporate
network shows up as a known address prefix. That prefix match is the whole
policy; it is a replaceable predicate rather than a constant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from autoproxy.core.interfaces import AddressPolicy, AddressSource


DEFAULT_PROXY_PREFIX = "172.17."

_IPV4_RE = re.compile(r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b")


def first_ipv4(listing: str) -> str | None:
    """Return the first IPv4-looking token of `listing` (IPv6 entries are skipped)."""

    match = _IPV4_RE.search(listing or "")
    return match.group(0) if match else None


def detect_ipv4(source: AddressSource) -> str | None:
    return first_ipv4(source())


@dataclass(frozen=True)
class PrefixPolicy:
    """True iff the address starts with `prefix` (plain string match)."""

    prefix: str = DEFAULT_PROXY_PREFIX

    def __call__(self, address: str) -> bool:
        return address.startswith(self.prefix)


def describe_policy(policy: AddressPolicy, *, negate: bool = False) -> str:
    """Verb phrase for user messages, e.g. "starts with 172.17"."""

    if isinstance(policy, PrefixPolicy):
        prefix = policy.prefix.rstrip(".")
        return f"does not start with {prefix}" if negate else f"starts with {prefix}"
    return "does not match the proxy policy" if negate else "matches the proxy policy"
