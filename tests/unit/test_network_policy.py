"""Unit tests for IP detection and the proxy policy."""

import subprocess

import pytest

from autoproxy.adapters import host_network
from autoproxy.core.services.network_policy import (
    DEFAULT_PROXY_PREFIX,
    PrefixPolicy,
    describe_policy,
    detect_ipv4,
    first_ipv4,
)


class TestFirstIpv4:
    def test_picks_first_ipv4(self):
        assert first_ipv4("172.17.5.10 10.0.0.2 fe80::1\n") == "172.17.5.10"

    def test_skips_leading_ipv6(self):
        assert first_ipv4("fe80::215:5dff:fe00:1 192.168.1.5 ") == "192.168.1.5"

    def test_empty_listing(self):
        assert first_ipv4("") is None
        assert first_ipv4("   \n") is None

    def test_ipv6_only(self):
        assert first_ipv4("fe80::1 2001:db8::2") is None

    def test_detect_uses_source(self):
        assert detect_ipv4(lambda: "10.0.0.1\n") == "10.0.0.1"
        assert detect_ipv4(lambda: "") is None


class TestPrefixPolicy:
    def test_default_prefix(self):
        assert PrefixPolicy().prefix == DEFAULT_PROXY_PREFIX == "172.17."

    @pytest.mark.parametrize("address", ["172.17.0.2", "172.17.5.10", "172.17.255.255"])
    def test_matches_prefix(self, address):
        assert PrefixPolicy()(address) is True

    @pytest.mark.parametrize("address", ["192.168.1.5", "10.0.0.1", "172.170.0.1", "172.16.0.1", "1.172.17.0"])
    def test_rejects_other_addresses(self, address):
        assert PrefixPolicy()(address) is False

    def test_custom_prefix(self):
        policy = PrefixPolicy("10.20.")
        assert policy("10.20.1.1")
        assert not policy("172.17.0.2")

    def test_describe(self):
        assert describe_policy(PrefixPolicy()) == "starts with 172.17"
        assert describe_policy(PrefixPolicy(), negate=True) == "does not start with 172.17"

    def test_describe_plain_callable(self):
        assert describe_policy(lambda address: True) == "matches the proxy policy"


class TestHostnameAddresses:
    def test_returns_stdout(self, monkeypatch):
        def fake_run(args, **kwargs):
            assert args == ["hostname", "-I"]
            return subprocess.CompletedProcess(args, 0, stdout="172.17.0.2 fe80::1 \n", stderr="")

        monkeypatch.setattr(host_network.subprocess, "run", fake_run)
        assert host_network.hostname_addresses() == "172.17.0.2 fe80::1 \n"

    def test_missing_command_is_empty(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise FileNotFoundError("hostname")

        monkeypatch.setattr(host_network.subprocess, "run", fake_run)
        assert host_network.hostname_addresses() == ""

    def test_failing_command_is_empty(self, monkeypatch):
        def fake_run(args, **kwargs):
            return subprocess.CompletedProcess(args, 1, stdout="", stderr="invalid option")

        monkeypatch.setattr(host_network.subprocess, "run", fake_run)
        assert host_network.hostname_addresses() == ""
