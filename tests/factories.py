"""Shared fakes for SkyDNS client tests.

RecordingHandler plays the control plane behind httpx.MockTransport;
FakeDNSTransport plays the data plane by answering queries with dnslib
replies built from zone-file lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx
from dnslib import RCODE, RR, DNSRecord

from skydns_client import SkyDNSClient

BASE_URL = "http://10.0.0.1:8080"
SECRET = "s3cr3t-shared-key"

SERVICE_JSON = (
    b'{"UUID":"1234","Name":"web","Version":"1.0.0","Environment":"production",'
    b'"Region":"east","Host":"10.0.0.5","Port":80,"TTL":30,'
    b'"Expires":"2026-10-17T12:00:00Z"}'
)


@dataclass
class RecordingHandler:
    """MockTransport handler returning a fixed response and recording requests."""

    status_code: int = 200
    content: bytes = b""
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@dataclass
class FakeDNSTransport:
    """DNSTransport answering every query from a list of zone-file records."""

    answers: list[str] = field(default_factory=list)
    rcode: int = RCODE.NOERROR
    mismatch_id: bool = False
    calls: list[tuple[DNSRecord, str, int]] = field(default_factory=list)

    def exchange(self, query: DNSRecord, host: str, port: int) -> DNSRecord:
        self.calls.append((query, host, port))
        reply = query.reply()
        for line in self.answers:
            for rr in RR.fromZone(line):
                reply.add_answer(rr)
        reply.header.rcode = self.rcode
        if self.mismatch_id:
            reply.header.id = (query.header.id + 1) % 65536
        return reply


def make_client(
    handler: RecordingHandler | None = None,
    dns: FakeDNSTransport | None = None,
    secret: str | None = SECRET,
    base_url: str = BASE_URL,
) -> SkyDNSClient:
    """Build a client wired to fake transports."""
    return SkyDNSClient(
        base_url,
        secret=secret,
        domain="skydns.local",
        transport=httpx.MockTransport(handler or RecordingHandler()),
        dns_transport=dns or FakeDNSTransport(),
    )
