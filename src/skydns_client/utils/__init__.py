"""Utility modules for the SkyDNS client."""

__all__: list[str] = []
