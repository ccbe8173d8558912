"""Transport layer of the SkyDNS client.

Public exports:
    new_request: Authenticated control-plane request builder
    new_dns_query: Data-plane query builder
    DNSTransport: Protocol for one DNS exchange
    UDPTransport: dnslib-backed DNSTransport
"""

from skydns_client.transport.builders import new_dns_query, new_request
from skydns_client.transport.dns import DNSTransport, UDPTransport, srv_target_counts

__all__ = [
    "DNSTransport",
    "UDPTransport",
    "new_dns_query",
    "new_request",
    "srv_target_counts",
]
