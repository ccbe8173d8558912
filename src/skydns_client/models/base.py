"""Base Pydantic model configuration for SkyDNS wire records.

All SkyDNS records inherit from SkyDNSBaseModel to ensure consistent behavior:
- Immutability (frozen=True) so records handed to callers cannot drift
- Lenient decoding (extra="ignore") so newer servers can add keys
- PascalCase aliases matching the directory's JSON, with snake_case names in Python
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class SkyDNSBaseModel(BaseModel):
    """Base model for all SkyDNS records.

    Example:
        >>> class Thing(SkyDNSBaseModel):
        ...     host: str
        ...     port: int = 0
        >>>
        >>> Thing.model_validate({"Host": "10.0.0.1", "Port": 80}).host
        '10.0.0.1'
        >>> Thing(host="a").model_dump(by_alias=True)
        {'Host': 'a', 'Port': 0}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_default=True,
    )
