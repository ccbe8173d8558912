"""Constants shared by the SkyDNS client.

Paths are relative to the control-plane base URL.
"""

SERVICES_PATH = "/skydns/services/"
CALLBACKS_PATH = "/skydns/callbacks/"
REGIONS_PATH = "/skydns/regions/"
ENVIRONMENTS_PATH = "/skydns/environments/"

# Query name of the data-plane region lookup, before domain qualification
REGIONS_QNAME = "regions"

DEFAULT_DNS_PORT = 53
DEFAULT_DOMAIN = "skydns.local"

# Recognized control-plane URL schemes; stripped when deriving the DNS host
URL_SCHEMES = ("http://", "https://")

MAX_PORT = 65535
MAX_TTL = 2**32 - 1
