"""SkyDNS client error taxonomy.

This module defines the sentinel errors returned by the client's status-code
mapping. Each sentinel is a distinct subclass of SkyDNSError so callers can
match on type; the code and details exist for logging and CLI output only.

Transport failures (httpx.HTTPError, OSError from the DNS socket) and decode
failures (pydantic.ValidationError) are never wrapped in these classes.
"""
from __future__ import annotations

from typing import Any


class SkyDNSError(Exception):
    """Base exception for all SkyDNS client errors.

    Attributes:
        code: Error code following the skydns:client/... pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NoAddressError(SkyDNSError):
    """Raised when the client is constructed without a control-plane address."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="skydns:client/no_address",
            message="No HTTP address specified",
            details=details or {},
        )


class InvalidAddressError(SkyDNSError):
    """Raised when the control-plane address cannot yield a DNS server address.

    This error occurs when the base URL has no http/https scheme, when its
    host[:port] authority cannot be parsed, or when the DNS port is out of
    range.

    Attributes:
        address: The rejected address
        reason: Why the address was rejected
    """

    def __init__(self, address: str, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Invalid address '{address}': {reason}"
        super().__init__(
            code="skydns:client/invalid_address",
            message=message,
            details={"address": address, "reason": reason, **(details or {})},
        )
        self.address = address
        self.reason = reason


class InvalidResponseError(SkyDNSError):
    """Raised when the directory answers with a status the operation does not expect.

    Attributes:
        status_code: HTTP status code, when the response came from the control plane
        rcode: DNS response code, when the response came from the data plane
    """

    def __init__(
        self,
        status_code: int | None = None,
        rcode: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details_dict: dict[str, Any] = {}
        if status_code is not None:
            details_dict["status_code"] = status_code
        if rcode is not None:
            details_dict["rcode"] = rcode
        if details:
            details_dict.update(details)

        super().__init__(
            code="skydns:client/invalid_response",
            message="Invalid HTTP response" if rcode is None else "Invalid DNS response",
            details=details_dict,
        )
        self.status_code = status_code
        self.rcode = rcode


class ServiceNotFoundError(SkyDNSError):
    """Raised when the directory has no record for the requested UUID."""

    def __init__(self, uuid: str | None = None, details: dict[str, Any] | None = None) -> None:
        details_dict: dict[str, Any] = {"uuid": uuid} if uuid is not None else {}
        super().__init__(
            code="skydns:client/service_not_found",
            message="Service not found",
            details={**details_dict, **(details or {})},
        )
        self.uuid = uuid


class ConflictingUUIDError(SkyDNSError):
    """Raised when registering a UUID the directory already holds.

    Registration is not idempotent: a second Add with the same UUID always
    lands here, even when the payload is unchanged.
    """

    def __init__(self, uuid: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="skydns:client/conflicting_uuid",
            message="Conflicting UUID",
            details={"uuid": uuid, **(details or {})},
        )
        self.uuid = uuid


__all__ = [
    "ConflictingUUIDError",
    "InvalidAddressError",
    "InvalidResponseError",
    "NoAddressError",
    "ServiceNotFoundError",
    "SkyDNSError",
]
