"""SkyDNS wire records.

Public exports:
    Service: A registered service instance
    Callback: A notification hook for service changes
    NameCount: Name to count mapping returned by aggregate queries
"""

from skydns_client.models.base import SkyDNSBaseModel
from skydns_client.models.entities import Callback, NameCount, Service

__all__ = [
    "Callback",
    "NameCount",
    "Service",
    "SkyDNSBaseModel",
]
