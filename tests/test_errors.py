"""Tests for the SkyDNS client error taxonomy."""

from skydns_client.errors import (
    ConflictingUUIDError,
    InvalidAddressError,
    InvalidResponseError,
    NoAddressError,
    ServiceNotFoundError,
    SkyDNSError,
)


class TestSkyDNSError:
    def test_basic_error_creation(self) -> None:
        error = SkyDNSError(code="skydns:test/error", message="Test error message")

        assert error.code == "skydns:test/error"
        assert error.message == "Test error message"
        assert error.details == {}
        assert str(error) == "Test error message"

    def test_to_dict(self) -> None:
        error = SkyDNSError("code", "msg", {"key": "value"})
        assert error.to_dict() == {"code": "code", "message": "msg", "details": {"key": "value"}}

    def test_sentinels_share_the_base_class(self) -> None:
        for error in (
            NoAddressError(),
            InvalidResponseError(status_code=500),
            ServiceNotFoundError("1234"),
            ConflictingUUIDError("1234"),
            InvalidAddressError("x", "bad"),
        ):
            assert isinstance(error, SkyDNSError)


class TestSentinels:
    def test_no_address(self) -> None:
        error = NoAddressError()
        assert error.code == "skydns:client/no_address"
        assert str(error) == "No HTTP address specified"

    def test_invalid_response_http(self) -> None:
        error = InvalidResponseError(status_code=500)
        assert error.code == "skydns:client/invalid_response"
        assert error.status_code == 500
        assert error.rcode is None
        assert error.details == {"status_code": 500}
        assert str(error) == "Invalid HTTP response"

    def test_invalid_response_dns(self) -> None:
        error = InvalidResponseError(rcode=2, details={"qname": "regions.skydns.local."})
        assert error.rcode == 2
        assert error.details == {"rcode": 2, "qname": "regions.skydns.local."}
        assert str(error) == "Invalid DNS response"

    def test_service_not_found(self) -> None:
        error = ServiceNotFoundError("1234")
        assert error.code == "skydns:client/service_not_found"
        assert error.uuid == "1234"
        assert error.details == {"uuid": "1234"}

    def test_service_not_found_without_uuid(self) -> None:
        assert ServiceNotFoundError().details == {}

    def test_conflicting_uuid(self) -> None:
        error = ConflictingUUIDError("1234")
        assert error.code == "skydns:client/conflicting_uuid"
        assert error.uuid == "1234"
        assert str(error) == "Conflicting UUID"

    def test_invalid_address(self) -> None:
        error = InvalidAddressError("10.0.0.1", "missing scheme")
        assert error.code == "skydns:client/invalid_address"
        assert "10.0.0.1" in str(error)
        assert error.details == {"address": "10.0.0.1", "reason": "missing scheme"}
