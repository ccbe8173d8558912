"""Request builders shared by every client operation.

Both builders are pure: they construct a message and never touch the network.
"""

from __future__ import annotations

import httpx
from dnslib import QTYPE, DNSRecord

from skydns_client.config import ClientConfig

JSON_CONTENT_TYPE = "application/json"


def new_request(
    config: ClientConfig,
    method: str,
    url: str,
    content: bytes | None = None,
) -> httpx.Request:
    """Build a control-plane request, authenticated when a secret is configured.

    The secret is attached verbatim as the Authorization header value; there
    is no scheme prefix and no signing.

    Args:
        config: Configuration of the owning client
        method: HTTP method (GET, PUT, PATCH, DELETE)
        url: Absolute request URL
        content: Optional JSON body

    Returns:
        An httpx.Request ready for httpx.Client.send().
    """
    headers: dict[str, str] = {}
    if config.secret:
        headers["Authorization"] = config.secret
    if content is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return httpx.Request(method, url, content=content, headers=headers)


def new_dns_query(qname: str, qtype: str | int) -> DNSRecord:
    """Build a recursion-desired DNS query for qname.

    The name is not validated.

    Args:
        qname: Query name (e.g. "regions.skydns.local.")
        qtype: Record type as a name ("SRV") or numeric code (33)
    """
    if isinstance(qtype, int):
        qtype = QTYPE[qtype]
    return DNSRecord.question(qname, qtype)


__all__ = [
    "new_dns_query",
    "new_request",
]
