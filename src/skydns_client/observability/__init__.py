"""Observability module for the SkyDNS client.

Structured logging (structlog) with console output for development and JSON
output for production.

Example:
    >>> from skydns_client.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("skydns.client.add", uuid="1234")
"""

from skydns_client.observability.logging import (
    configure_logging,
    get_logger,
    sanitize_for_logging,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_for_logging",
]
