"""Tests for client configuration and DNS address derivation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skydns_client.config import ClientConfig, dns_host_from_base, fqdn, join_host_port
from skydns_client.errors import InvalidAddressError, NoAddressError


class TestHelpers:
    def test_fqdn_appends_dot_once(self) -> None:
        assert fqdn("skydns.local") == "skydns.local."
        assert fqdn("skydns.local.") == "skydns.local."

    def test_join_host_port_brackets_ipv6(self) -> None:
        assert join_host_port("10.0.0.1", 53) == "10.0.0.1:53"
        assert join_host_port("::1", 53) == "[::1]:53"

    @pytest.mark.parametrize(
        ("base_url", "host"),
        [
            ("http://10.0.0.1:8080", "10.0.0.1"),
            ("https://dir.example.com/api", "dir.example.com"),
            ("HTTP://dir.example.com", "dir.example.com"),
            ("http://[::1]:8080", "::1"),
        ],
    )
    def test_dns_host_from_base(self, base_url: str, host: str) -> None:
        assert dns_host_from_base(base_url) == host

    def test_dns_host_from_base_without_scheme_raises(self) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            dns_host_from_base("10.0.0.1:8080")
        assert exc_info.value.address == "10.0.0.1:8080"
        assert "scheme" in exc_info.value.reason


class TestClientConfig:
    def test_scenario(self) -> None:
        config = ClientConfig.create("http://10.0.0.1:8080", domain="skydns.local", dns_port=0)
        assert config.dns_address == "10.0.0.1:53"
        assert config.domain == ".skydns.local."
        assert config.secret is None

    def test_ipv6_dns_address(self) -> None:
        config = ClientConfig.create("http://[fd00::1]:8080", domain="skydns.local")
        assert config.dns_address == "[fd00::1]:53"

    def test_empty_secret_means_none(self) -> None:
        assert ClientConfig.create("http://10.0.0.1", secret="").secret is None

    def test_root_domain(self) -> None:
        assert ClientConfig.create("http://10.0.0.1", domain=".").domain == "."

    def test_empty_base_raises(self) -> None:
        with pytest.raises(NoAddressError):
            ClientConfig.create("")

    @pytest.mark.parametrize("dns_port", [-1, 65536])
    def test_out_of_range_port_raises(self, dns_port: int) -> None:
        with pytest.raises(InvalidAddressError):
            ClientConfig.create("http://10.0.0.1", dns_port=dns_port)

    def test_is_frozen(self) -> None:
        config = ClientConfig.create("http://10.0.0.1")
        with pytest.raises(ValidationError):
            config.secret = "changed"  # type: ignore[misc]


class TestFromEnv:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SKYDNS_BASE_URL", "http://10.0.0.1:8080")
        config = ClientConfig.from_env()
        assert config.dns_address == "10.0.0.1:53"
        assert config.domain == ".skydns.local."
        assert config.secret is None

    def test_non_integer_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SKYDNS_BASE_URL", "http://10.0.0.1:8080")
        monkeypatch.setenv("SKYDNS_DNS_PORT", "fifty-three")
        with pytest.raises(InvalidAddressError):
            ClientConfig.from_env()
