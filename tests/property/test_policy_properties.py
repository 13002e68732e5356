"""Property tests for IP detection and the prefix policy."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from autoproxy.core.services.network_policy import PrefixPolicy, first_ipv4


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

octets = st.integers(min_value=0, max_value=255)

ipv4_addresses = st.tuples(octets, octets, octets, octets).map(lambda t: ".".join(map(str, t)))

proxied_addresses = st.tuples(octets, octets).map(lambda t: f"172.17.{t[0]}.{t[1]}")

# IPv4-mapped forms such as ::ffff:1.2.3.4 embed a dotted quad; keep pure IPv6.
ipv6_addresses = st.ip_addresses(v=6).map(str).filter(lambda s: "." not in s)

_settings = settings(max_examples=200, suppress_health_check=[HealthCheck.function_scoped_fixture])


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@_settings
@given(address=proxied_addresses)
def test_proxied_network_always_needs_proxy(address: str) -> None:
    assert PrefixPolicy()(address) is True


@_settings
@given(address=ipv4_addresses.filter(lambda a: not a.startswith("172.17.")))
def test_other_networks_never_need_proxy(address: str) -> None:
    assert PrefixPolicy()(address) is False


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


@_settings
@given(
    leading=st.lists(ipv6_addresses, max_size=3),
    address=ipv4_addresses,
    trailing=st.lists(ipv4_addresses | ipv6_addresses, max_size=3),
)
def test_first_ipv4_skips_ipv6(leading: list[str], address: str, trailing: list[str]) -> None:
    listing = " ".join([*leading, address, *trailing]) + " \n"
    assert first_ipv4(listing) == address
