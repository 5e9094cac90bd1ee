"""Staged, validated Subject construction.

Setters stage values (last write wins) and return the builder for
chaining. ``build()`` is the single validating conversion into an
immutable Subject; it consumes the builder whether it succeeds or not.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

from subjectctl.domain.errors import BuilderConsumedError, InvalidGeoCodeError, MissingFieldError
from subjectctl.domain.fields import (
    Environment,
    GlobalGeo,
    LocalGeo,
    Locator,
    OwnershipGroup,
    PayloadIdentifier,
    PayloadType,
    ServiceIdentifier,
    geo_locator_from_tokens,
)
from subjectctl.domain.geo import is_valid_region_code
from subjectctl.domain.subject import Subject
from subjectctl.domain.types import SubjectField


@dataclass
class _StagedSubject:
    """Optional slots; None means never set."""

    environment: Environment | None = None
    ownership_group: OwnershipGroup | None = None
    geo_locator: LocalGeo | GlobalGeo | Locator | None = None
    service_identifier: ServiceIdentifier | None = None
    payload_type: PayloadType | None = None
    payload_identifier: PayloadIdentifier | None = None


class SubjectBuilder:
    """Accumulate subject fields, then ``build()`` once.

    Usage::

        subject = (
            SubjectBuilder()
            .environment("prod")
            .owner("abc", "xyz")
            .geo_locator("local")
            .service("plc-gateway", "1")
            .payload_type("data")
            .payload_identifier(["system", "sensor"])
            .build()
        )

    Plain-string arguments are decoded immediately, so a bad token raises
    the same field error the codec would.
    """

    def __init__(self) -> None:
        self._staged: _StagedSubject | None = _StagedSubject()

    def _stage(self) -> _StagedSubject:
        if self._staged is None:
            raise BuilderConsumedError()
        return self._staged

    def environment(self, value: Environment | str) -> SubjectBuilder:
        if not isinstance(value, Environment):
            value = Environment.from_tokens([value])
        self._stage().environment = value
        return self

    def ownership_group(self, value: OwnershipGroup) -> SubjectBuilder:
        self._stage().ownership_group = value
        return self

    def owner(self, enterprise: str, op_group: str) -> SubjectBuilder:
        return self.ownership_group(OwnershipGroup.from_tokens([enterprise, op_group]))

    def geo_locator(self, value: LocalGeo | GlobalGeo | Locator | str) -> SubjectBuilder:
        """Stage a geo locator; a string must be ``"local"`` or ``"global"``."""
        if isinstance(value, str):
            value = geo_locator_from_tokens([value])
        self._stage().geo_locator = value
        return self

    def locator(self, iso_region_code: str, op_region: str, op_identifier: str) -> SubjectBuilder:
        """Stage an explicit locator. The region code is checked at ``build()``."""
        return self.geo_locator(Locator.create(iso_region_code, op_region, op_identifier))

    def service_identifier(self, value: ServiceIdentifier) -> SubjectBuilder:
        self._stage().service_identifier = value
        return self

    def service(self, service_name: str, instance_id: str) -> SubjectBuilder:
        return self.service_identifier(ServiceIdentifier.from_tokens([service_name, instance_id]))

    def payload_type(self, value: PayloadType | str) -> SubjectBuilder:
        if not isinstance(value, PayloadType):
            value = PayloadType.from_tokens([value])
        self._stage().payload_type = value
        return self

    def payload_identifier(self, value: PayloadIdentifier | Iterable[str]) -> SubjectBuilder:
        """Stage the payload path. An empty sequence counts as set.

        A plain string is a single segment, never split per character.
        """
        if isinstance(value, str):
            value = PayloadIdentifier.from_tokens([value])
        elif not isinstance(value, PayloadIdentifier):
            value = PayloadIdentifier.from_tokens(list(value))
        self._stage().payload_identifier = value
        return self

    def build(self) -> Subject:
        """Validate the staged fields and return an immutable Subject.

        Raises:
            MissingFieldError: A field was never set (checked in wire order).
            InvalidGeoCodeError: An explicit locator's region code is unknown.
            BuilderConsumedError: ``build()`` was already called.
        """
        staged = self._stage()
        self._staged = None

        for slot in fields(staged):
            if getattr(staged, slot.name) is None:
                raise MissingFieldError(SubjectField(slot.name))

        geo = staged.geo_locator
        if isinstance(geo, Locator) and not is_valid_region_code(geo.iso_region_code):
            raise InvalidGeoCodeError(geo.iso_region_code)

        return Subject(
            environment=staged.environment,
            ownership_group=staged.ownership_group,
            geo_locator=geo,
            service_identifier=staged.service_identifier,
            payload_type=staged.payload_type,
            payload_identifier=staged.payload_identifier,
        )
