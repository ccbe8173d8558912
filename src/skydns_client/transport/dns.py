"""DNS transport for the SkyDNS data plane.

A DNSTransport performs one query/response exchange with a DNS server. The
default UDPTransport sends the packed query with dnslib and parses the reply;
tests substitute an in-memory implementation.
"""

from __future__ import annotations

from collections import Counter
from typing import Protocol, runtime_checkable

from dnslib import QTYPE, DNSRecord

from skydns_client.models.entities import NameCount


@runtime_checkable
class DNSTransport(Protocol):
    """One blocking DNS exchange."""

    def exchange(self, query: DNSRecord, host: str, port: int) -> DNSRecord:
        """Send query to host:port and return the parsed response.

        Raises:
            OSError: On socket failure or timeout.
            dnslib.DNSError: If the response cannot be parsed.
        """
        ...


class UDPTransport:
    """DNS transport over UDP (or TCP when tcp=True) using dnslib.

    Attributes:
        timeout: Socket timeout in seconds; None blocks until a reply arrives
        tcp: Use TCP instead of UDP
    """

    def __init__(self, timeout: float | None = None, tcp: bool = False) -> None:
        self.timeout = timeout
        self.tcp = tcp

    def exchange(self, query: DNSRecord, host: str, port: int) -> DNSRecord:
        wire = query.send(host, port, tcp=self.tcp, timeout=self.timeout, ipv6=":" in host)
        return DNSRecord.parse(wire)


def srv_target_counts(reply: DNSRecord, domain: str) -> NameCount:
    """Count SRV answers per target name.

    Targets are reported relative to domain (the dot-prefixed, fully
    qualified directory suffix) and without a trailing dot. Answers of any
    other type are ignored.

    Example:
        >>> from dnslib import RR
        >>> reply = DNSRecord.question("regions.skydns.local.", "SRV").reply()
        >>> reply.add_answer(*RR.fromZone("regions.skydns.local. 60 SRV 10 100 53 east.skydns.local."))
        >>> srv_target_counts(reply, ".skydns.local.")
        {'east': 1}
    """
    suffix = domain.lower()
    counts: Counter[str] = Counter()
    for rr in reply.rr:
        if rr.rtype != QTYPE.SRV:
            continue
        target = str(rr.rdata.target)
        if suffix != "." and target.lower().endswith(suffix) and len(target) > len(suffix):
            target = target[: -len(suffix)]
        counts[target.rstrip(".")] += 1
    return dict(counts)


__all__ = [
    "DNSTransport",
    "UDPTransport",
    "srv_target_counts",
]
