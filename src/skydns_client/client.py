"""Dual-protocol client for the SkyDNS service directory.

SkyDNSClient is one handle onto the directory's two interfaces:
- the HTTP control plane, which registers, updates, removes and lists
  service records under ``<base>/skydns/``
- the DNS data plane, which answers read-only queries on the same host

Every operation performs exactly one blocking round trip. There are no
retries, no caching and no background work; transport timeouts apply as
configured on the transports themselves.

Example:
    >>> from skydns_client import Service, SkyDNSClient
    >>>
    >>> with SkyDNSClient("http://10.0.0.1:8080", secret="s3cr3t", domain="skydns.local") as client:
    ...     client.add("1234", Service(name="web", host="10.0.0.5", port=80, ttl=30))
    ...     client.update("1234", 60)
    ...     client.get_regions_dns()
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from dnslib import RCODE
from pydantic import TypeAdapter

from skydns_client.config import ClientConfig
from skydns_client.errors import (
    ConflictingUUIDError,
    InvalidResponseError,
    ServiceNotFoundError,
)
from skydns_client.models.constants import (
    CALLBACKS_PATH,
    DEFAULT_DOMAIN,
    ENVIRONMENTS_PATH,
    MAX_TTL,
    REGIONS_PATH,
    REGIONS_QNAME,
    SERVICES_PATH,
)
from skydns_client.models.entities import Callback, NameCount, Service
from skydns_client.observability import get_logger
from skydns_client.transport.builders import new_dns_query, new_request
from skydns_client.transport.dns import DNSTransport, UDPTransport, srv_target_counts
from skydns_client.utils.sanitization import sanitize_token, sanitize_url

logger = get_logger(__name__)

# The directory encodes an empty collection as JSON null
_SERVICES_ADAPTER: TypeAdapter[list[Service] | None] = TypeAdapter(list[Service] | None)
_NAME_COUNT_ADAPTER: TypeAdapter[NameCount | None] = TypeAdapter(NameCount | None)


class SkyDNSClient:
    """Client handle for one SkyDNS directory.

    The handle owns one httpx.Client and one DNSTransport for its lifetime.
    Its configuration is immutable, so a single handle may be shared between
    threads as long as the transports are.

    Attributes:
        config: Immutable configuration (base URL, secret, DNS address, domain)
    """

    def __init__(
        self,
        base_url: str,
        secret: str | None = None,
        domain: str = DEFAULT_DOMAIN,
        dns_port: int = 0,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        dns_transport: DNSTransport | None = None,
    ) -> None:
        """Initialize the client. No network I/O happens here.

        Args:
            base_url: Control-plane base URL (e.g. "http://10.0.0.1:8080")
            secret: Optional shared secret sent as the Authorization header
            domain: Directory domain (e.g. "skydns.local")
            dns_port: DNS port on the control-plane host; 0 selects 53
            timeout: Optional timeout in seconds for both transports. When
                omitted each transport keeps its own default.
            transport: Optional custom httpx transport (e.g. httpx.MockTransport)
            dns_transport: Optional custom DNS transport

        Raises:
            NoAddressError: If base_url is empty.
            InvalidAddressError: If no DNS address can be derived from base_url.
        """
        self.config = ClientConfig.create(base_url, secret=secret, domain=domain, dns_port=dns_port)

        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(timeout)
        if transport is not None:
            client_kwargs["transport"] = transport
        self._http = httpx.Client(**client_kwargs)
        self._dns = dns_transport if dns_transport is not None else UDPTransport(timeout=timeout)

    @classmethod
    def from_env(
        cls,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        dns_transport: DNSTransport | None = None,
    ) -> SkyDNSClient:
        """Build a client from SKYDNS_* environment variables (see skydns_client.config)."""
        config = ClientConfig.from_env()
        return cls(
            config.base_url,
            secret=config.secret,
            domain=config.domain,
            dns_port=config.dns_port,
            timeout=timeout,
            transport=transport,
            dns_transport=dns_transport,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def dns_address(self) -> str:
        return self.config.dns_address

    @property
    def domain(self) -> str:
        return self.config.domain

    def close(self) -> None:
        """Release the HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> SkyDNSClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"SkyDNSClient(base_url={sanitize_url(self.config.base_url)!r}, "
            f"secret={sanitize_token(self.config.secret or '')!r}, "
            f"dns_address={self.config.dns_address!r}, domain={self.config.domain!r})"
        )

    # ------------------------------------------------------------------
    # Control plane
    # ------------------------------------------------------------------

    def add(self, uuid: str, service: Service) -> None:
        """Register service under uuid.

        Registration is not idempotent: repeating it with the same uuid
        raises ConflictingUUIDError. Use update() or delete() first.

        Raises:
            ConflictingUUIDError: If the directory already holds uuid (409).
            InvalidResponseError: On any status other than 201 or 409.
        """
        response = self._do("PUT", self._service_url(uuid), service.to_json())
        if response.status_code == httpx.codes.CREATED:
            return
        if response.status_code == httpx.codes.CONFLICT:
            raise ConflictingUUIDError(uuid)
        raise self._invalid(response)

    def get(self, uuid: str) -> Service:
        """Fetch the service registered under uuid.

        Raises:
            ServiceNotFoundError: If the directory has no such uuid (404).
            InvalidResponseError: On any status other than 200 or 404.
            pydantic.ValidationError: If the body is not a service record.
        """
        response = self._do("GET", self._service_url(uuid))
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ServiceNotFoundError(uuid)
        if response.status_code != httpx.codes.OK:
            raise self._invalid(response)
        return Service.model_validate_json(response.content)

    def delete(self, uuid: str) -> None:
        """Remove the service registered under uuid.

        Raises:
            ServiceNotFoundError: If the directory has no such uuid (404).
            InvalidResponseError: On any non-2xx status other than 404.
        """
        response = self._do("DELETE", self._service_url(uuid))
        self._check_mutation(response, uuid)

    def update(self, uuid: str, ttl: int) -> None:
        """Refresh the time-to-live of the service registered under uuid.

        Args:
            uuid: Directory key of the service
            ttl: New time-to-live in seconds (unsigned 32-bit)

        Raises:
            ValueError: If ttl is outside 0..2**32-1.
            ServiceNotFoundError: If the directory has no such uuid (404).
            InvalidResponseError: On any non-2xx status other than 404.
        """
        if not 0 <= ttl <= MAX_TTL:
            raise ValueError(f"ttl must be between 0 and {MAX_TTL}, got {ttl}")
        body = f'{{"TTL":{ttl}}}'.encode()
        response = self._do("PATCH", self._service_url(uuid), body)
        self._check_mutation(response, uuid)

    def get_all_services(self) -> list[Service]:
        """List every registered service, in server order.

        Raises:
            ServiceNotFoundError: If the collection endpoint answers 404.
            InvalidResponseError: On any status other than 200 or 404.
            pydantic.ValidationError: If the body is not a list of service records.
        """
        response = self._do("GET", self._service_url(""))
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ServiceNotFoundError()
        if response.status_code != httpx.codes.OK:
            raise self._invalid(response)
        return _SERVICES_ADAPTER.validate_json(response.content) or []

    def get_regions(self) -> NameCount:
        """Return the number of registered services per region."""
        return self._get_name_count(REGIONS_PATH)

    def get_environments(self) -> NameCount:
        """Return the number of registered services per environment."""
        return self._get_name_count(ENVIRONMENTS_PATH)

    def add_callback(self, uuid: str, callback: Callback) -> None:
        """Attach callback to the service registered under uuid.

        Raises:
            ServiceNotFoundError: If the target service does not exist (404).
            InvalidResponseError: On any status other than 201 or 404.
        """
        response = self._do("PUT", self._callback_url(uuid), callback.to_json())
        if response.status_code == httpx.codes.CREATED:
            return
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ServiceNotFoundError(uuid)
        raise self._invalid(response)

    # ------------------------------------------------------------------
    # Data plane
    # ------------------------------------------------------------------

    def get_regions_dns(self) -> NameCount:
        """Count regions through the DNS data plane.

        Sends an SRV query for ``regions`` under the directory domain and
        counts the answers per target name.

        Raises:
            ServiceNotFoundError: If the server answers NXDOMAIN.
            InvalidResponseError: On any other error rcode, or if the reply
                does not match the query id.
            OSError: On socket failure or timeout.
        """
        qname = REGIONS_QNAME + self.config.domain
        query = new_dns_query(qname, "SRV")
        logger.debug(
            "skydns.dns.exchange",
            qname=qname,
            qtype="SRV",
            server=self.config.dns_address,
        )
        reply = self._dns.exchange(query, self.config.dns_host, self.config.dns_port)

        rcode = reply.header.rcode
        logger.debug(
            "skydns.dns.reply",
            qname=qname,
            rcode=RCODE.get(rcode, rcode),
            answers=len(reply.rr),
        )
        if reply.header.id != query.header.id:
            raise InvalidResponseError(
                rcode=rcode,
                details={"reason": "reply id does not match query id"},
            )
        if rcode == RCODE.NXDOMAIN:
            raise ServiceNotFoundError(details={"qname": qname})
        if rcode != RCODE.NOERROR:
            raise InvalidResponseError(rcode=rcode, details={"qname": qname})
        return srv_target_counts(reply, self.config.domain)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _service_url(self, uuid: str) -> str:
        return f"{self.config.base_url}{SERVICES_PATH}{quote(uuid, safe='')}"

    def _callback_url(self, uuid: str) -> str:
        return f"{self.config.base_url}{CALLBACKS_PATH}{quote(uuid, safe='')}"

    def _do(self, method: str, url: str, content: bytes | None = None) -> httpx.Response:
        """Send one authenticated request; transport errors propagate unchanged."""
        request = new_request(self.config, method, url, content)
        logger.debug("skydns.client.request", method=method, url=sanitize_url(url))
        response = self._http.send(request)
        logger.debug(
            "skydns.client.response",
            method=method,
            url=sanitize_url(url),
            status_code=response.status_code,
        )
        return response

    def _get_name_count(self, path: str) -> NameCount:
        response = self._do("GET", f"{self.config.base_url}{path}")
        if response.status_code != httpx.codes.OK:
            raise self._invalid(response)
        return _NAME_COUNT_ADAPTER.validate_json(response.content) or {}

    def _check_mutation(self, response: httpx.Response, uuid: str) -> None:
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ServiceNotFoundError(uuid)
        if not response.is_success:
            raise self._invalid(response)

    @staticmethod
    def _invalid(response: httpx.Response) -> InvalidResponseError:
        logger.warning(
            "skydns.client.invalid_response",
            method=response.request.method,
            url=sanitize_url(str(response.request.url)),
            status_code=response.status_code,
        )
        return InvalidResponseError(status_code=response.status_code)


__all__ = [
    "SkyDNSClient",
]
