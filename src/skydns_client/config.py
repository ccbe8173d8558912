"""Immutable client configuration and DNS address derivation.

The control plane and the data plane share one host: the DNS server address
is the host of the control-plane base URL paired with the DNS port.

Environment Variables:
    SKYDNS_BASE_URL: Control-plane base URL (e.g. http://10.0.0.1:8080)
    SKYDNS_SECRET: Shared secret sent as the Authorization header
    SKYDNS_DOMAIN: Directory domain (default: skydns.local)
    SKYDNS_DNS_PORT: DNS port, 0 for the default 53

Example:
    >>> config = ClientConfig.create("http://10.0.0.1:8080", domain="skydns.local")
    >>> config.dns_address
    '10.0.0.1:53'
    >>> config.domain
    '.skydns.local.'
"""

from __future__ import annotations

import os
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from skydns_client.errors import InvalidAddressError, NoAddressError
from skydns_client.models.constants import (
    DEFAULT_DNS_PORT,
    DEFAULT_DOMAIN,
    MAX_PORT,
    URL_SCHEMES,
)

ENV_BASE_URL = "SKYDNS_BASE_URL"
ENV_SECRET = "SKYDNS_SECRET"
ENV_DOMAIN = "SKYDNS_DOMAIN"
ENV_DNS_PORT = "SKYDNS_DNS_PORT"


def fqdn(name: str) -> str:
    """Return name terminated by a dot.

    Example:
        >>> fqdn("skydns.local")
        'skydns.local.'
        >>> fqdn("skydns.local.")
        'skydns.local.'
    """
    return name if name.endswith(".") else f"{name}."


def _domain_suffix(domain: str) -> str:
    bare = domain.strip(".")
    return "." + fqdn(bare) if bare else "."


def join_host_port(host: str, port: int) -> str:
    """Combine host and port into ``host:port``, bracketing IPv6 literals.

    Example:
        >>> join_host_port("10.0.0.1", 53)
        '10.0.0.1:53'
        >>> join_host_port("::1", 53)
        '[::1]:53'
    """
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def dns_host_from_base(base_url: str) -> str:
    """Extract the host of the control-plane base URL.

    Raises:
        InvalidAddressError: If the URL has no recognized scheme, no host, or a
            malformed port.
    """
    if not base_url.lower().startswith(URL_SCHEMES):
        raise InvalidAddressError(base_url, f"scheme must be one of {', '.join(URL_SCHEMES)}")
    try:
        parts = urlsplit(base_url)
        # Accessing .port validates it
        _ = parts.port
    except ValueError as e:
        raise InvalidAddressError(base_url, str(e)) from e
    if not parts.hostname:
        raise InvalidAddressError(base_url, "missing host")
    return parts.hostname


class ClientConfig(BaseModel):
    """Configuration of one SkyDNS client handle.

    Built once by create() and never mutated; the client and every request
    builder read from it.

    Attributes:
        base_url: Control-plane base URL, without trailing slash
        secret: Shared secret for the Authorization header, if any
        dns_host: Host of the DNS data plane, derived from base_url
        dns_port: Port of the DNS data plane
        domain: Directory domain suffix, dot-prefixed and fully qualified
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(..., min_length=1)
    secret: str | None = Field(default=None, repr=False)
    dns_host: str = Field(..., min_length=1)
    dns_port: int = Field(default=DEFAULT_DNS_PORT, ge=1, le=MAX_PORT)
    domain: str

    @property
    def dns_address(self) -> str:
        """DNS server address as ``host:port``."""
        return join_host_port(self.dns_host, self.dns_port)

    @classmethod
    def create(
        cls,
        base_url: str,
        secret: str | None = None,
        domain: str = DEFAULT_DOMAIN,
        dns_port: int = 0,
    ) -> ClientConfig:
        """Validate construction parameters and derive the data-plane address.

        Args:
            base_url: Control-plane base URL; must start with http:// or https://
            secret: Optional shared secret; an empty string means none
            domain: Directory domain name (e.g. "skydns.local")
            dns_port: DNS port; 0 selects the default port 53

        Raises:
            NoAddressError: If base_url is empty.
            InvalidAddressError: If no DNS host can be derived from base_url
                or dns_port is out of range.
        """
        if not base_url:
            raise NoAddressError()
        if dns_port == 0:
            dns_port = DEFAULT_DNS_PORT
        if not 0 < dns_port <= MAX_PORT:
            raise InvalidAddressError(str(dns_port), "DNS port out of range")

        return cls(
            base_url=base_url.rstrip("/"),
            secret=secret or None,
            dns_host=dns_host_from_base(base_url),
            dns_port=dns_port,
            domain=_domain_suffix(domain),
        )

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build the configuration from SKYDNS_* environment variables.

        Raises:
            NoAddressError: If SKYDNS_BASE_URL is unset or empty.
            InvalidAddressError: If SKYDNS_DNS_PORT is not an integer, or as create().
        """
        raw_port = os.environ.get(ENV_DNS_PORT, "0").strip() or "0"
        try:
            dns_port = int(raw_port)
        except ValueError as e:
            raise InvalidAddressError(raw_port, "DNS port is not an integer") from e
        return cls.create(
            base_url=os.environ.get(ENV_BASE_URL, ""),
            secret=os.environ.get(ENV_SECRET),
            domain=os.environ.get(ENV_DOMAIN, DEFAULT_DOMAIN),
            dns_port=dns_port,
        )
