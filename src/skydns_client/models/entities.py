"""Directory records exchanged with the SkyDNS control plane.

The JSON shape is owned by the directory server: PascalCase keys, an
optional UUID that is left out when empty, and server-assigned expiry.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skydns_client.models.base import SkyDNSBaseModel
from skydns_client.models.constants import MAX_PORT, MAX_TTL

NameCount = dict[str, int]
"""Name to occurrence count, as returned by the region/environment aggregates."""


class _Record(SkyDNSBaseModel):
    uuid: str = Field(default="", alias="UUID")

    def to_json(self) -> bytes:
        """Encode as the request body the control plane expects."""
        exclude = {"uuid"} if not self.uuid else None
        return self.model_dump_json(by_alias=True, exclude=exclude, exclude_none=True).encode()


class Service(_Record):
    """A registered service instance.

    Attributes:
        uuid: Directory key of the instance (omitted from JSON when empty)
        name: Service name (e.g. "web")
        version: Service version (e.g. "1.0.0")
        environment: Deployment environment (e.g. "production")
        region: Region the instance runs in
        host: Address clients should connect to
        port: Port clients should connect to
        ttl: Seconds the registration lives without an update
        expires: Absolute expiry, assigned by the server
    """

    name: str = ""
    version: str = ""
    environment: str = ""
    region: str = ""
    host: str = ""
    port: int = Field(default=0, ge=0, le=MAX_PORT)
    ttl: int = Field(default=0, ge=0, le=MAX_TTL, alias="TTL")
    expires: datetime | None = None


class Callback(_Record):
    """A notification hook attached to services matching its fields.

    The directory calls back ``host:port`` with ``reply`` when a matching
    service changes.
    """

    name: str = ""
    version: str = ""
    environment: str = ""
    region: str = ""
    host: str = ""
    reply: str = ""
    port: int = Field(default=0, ge=0, le=MAX_PORT)
