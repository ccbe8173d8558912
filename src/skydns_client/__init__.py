"""SkyDNS client.

One handle onto both interfaces of a SkyDNS service directory: the HTTP
control plane (register, update, remove and list service records) and the
DNS data plane (resolve directory names as standard DNS records).

Example:
    >>> from skydns_client import SkyDNSClient, Service
    >>>
    >>> client = SkyDNSClient("http://10.0.0.1:8080", secret="s3cr3t", domain="skydns.local")
    >>> client.dns_address
    '10.0.0.1:53'
"""

from skydns_client.client import SkyDNSClient
from skydns_client.config import ClientConfig
from skydns_client.errors import (
    ConflictingUUIDError,
    InvalidAddressError,
    InvalidResponseError,
    NoAddressError,
    ServiceNotFoundError,
    SkyDNSError,
)
from skydns_client.models import Callback, NameCount, Service

__version__ = "0.1.0"

__all__ = [
    "Callback",
    "ClientConfig",
    "ConflictingUUIDError",
    "InvalidAddressError",
    "InvalidResponseError",
    "NameCount",
    "NoAddressError",
    "Service",
    "ServiceNotFoundError",
    "SkyDNSClient",
    "SkyDNSError",
    "__version__",
]
