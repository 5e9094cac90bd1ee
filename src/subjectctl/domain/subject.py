"""The Subject aggregate.

INVARIANT: A Subject is either fully valid or does not exist. Instances
are frozen; a changed subject is a new instance.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

from subjectctl.domain.fields import (
    Environment,
    GeoLocator,
    Locator,
    OwnershipGroup,
    PayloadIdentifier,
    PayloadType,
    ServiceIdentifier,
)
from subjectctl.domain.geo import is_valid_region_code


class Subject(BaseModel):
    """Complete, typed address of one message stream.

    Field names match the structured (dict/JSON) form used by external
    persistence and transport layers.
    """

    model_config = {"frozen": True}

    environment: Environment
    ownership_group: OwnershipGroup
    geo_locator: GeoLocator
    service_identifier: ServiceIdentifier
    payload_type: PayloadType
    payload_identifier: PayloadIdentifier

    @model_validator(mode="after")
    def _check_region_code(self) -> Subject:
        geo = self.geo_locator
        if isinstance(geo, Locator) and not is_valid_region_code(geo.iso_region_code):
            msg = f"Unknown ISO 3166-2 region code: {geo.iso_region_code!r}"
            raise ValueError(msg)
        return self

    def to_tokens(self) -> list[str]:
        """All wire tokens in field order."""
        return [
            *self.environment.to_tokens(),
            *self.ownership_group.to_tokens(),
            *self.geo_locator.to_tokens(),
            *self.service_identifier.to_tokens(),
            *self.payload_type.to_tokens(),
            *self.payload_identifier.to_tokens(),
        ]

    def __str__(self) -> str:
        from subjectctl.domain.codec import format_subject

        return format_subject(self)

    @classmethod
    def parse(cls, text: str) -> Subject:
        """Parse a dotted wire string. See :func:`subjectctl.domain.codec.parse_subject`."""
        from subjectctl.domain.codec import parse_subject

        return parse_subject(text)

    def to_dict(self) -> dict[str, Any]:
        """Structured form with enum values as their wire tokens."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subject:
        """Rebuild a Subject from :meth:`to_dict` output.

        Raises:
            pydantic.ValidationError: If any field is missing or invalid.
        """
        return cls.model_validate(data)
