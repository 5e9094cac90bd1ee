"""Subject field types and their token encodings.

Each field type exposes ``to_tokens()`` (its canonical wire tokens) and
``from_tokens(tokens)`` (consumes exactly the tokens it owns).

Environment and PayloadType are StrEnums whose values *are* the wire
tokens, so one table serves both directions.

INVARIANT: No token is ever empty or contains the separator. Free-form
tokens are checked when the field value is constructed.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import StrEnum
from typing import Annotated, Any, Literal, TypeVar

from pydantic import (
    BaseModel,
    Field,
    RootModel,
    StringConstraints,
    ValidationError,
    field_validator,
)

from subjectctl.domain.errors import (
    InvalidArityError,
    InvalidEnumTokenError,
    InvalidGeoCodeError,
    InvalidTokenError,
)
from subjectctl.domain.geo import is_valid_region_code
from subjectctl.domain.types import GLOBAL_TOKEN, LOCAL_TOKEN, SubjectField

# A single wire token: non-empty, no separator.
Token = Annotated[str, StringConstraints(pattern=r"^[^.]+$")]

LOCATOR_ARITY = 3

_EnumT = TypeVar("_EnumT", bound=StrEnum)
_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _check_arity(field: SubjectField, tokens: Sequence[str], expected: int) -> None:
    if len(tokens) != expected:
        raise InvalidArityError(field, expected=expected, actual=len(tokens))


def _enum_from_tokens(
    enum_cls: type[_EnumT], field: SubjectField, tokens: Sequence[str]
) -> _EnumT:
    _check_arity(field, tokens, 1)
    try:
        return enum_cls(tokens[0])
    except ValueError:
        raise InvalidEnumTokenError(field, tokens[0]) from None


def _build(field: SubjectField, model_cls: type[_ModelT], **values: Any) -> _ModelT:
    """Construct *model_cls*, reporting a bad token as InvalidTokenError."""
    try:
        return model_cls(**values)
    except ValidationError as exc:
        bad = exc.errors()[0].get("input", "")
        raise InvalidTokenError(field, str(bad)) from exc


# --- Fixed-vocabulary fields ---


class Environment(StrEnum):
    """Deployment environment."""

    PRODUCTION = "prod"
    STAGING = "staging"
    DEV = "dev"

    def to_tokens(self) -> list[str]:
        return [self.value]

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> Environment:
        return _enum_from_tokens(cls, SubjectField.ENVIRONMENT, tokens)


class PayloadType(StrEnum):
    """Kind of payload carried on the subject."""

    HEARTBEAT = "heartbeat"
    DATA = "data"
    DIAGNOSTICS = "diagnostics"
    COMMAND = "command"
    EVENT = "event"
    CUSTOM = "custom"

    def to_tokens(self) -> list[str]:
        return [self.value]

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> PayloadType:
        return _enum_from_tokens(cls, SubjectField.PAYLOAD_TYPE, tokens)


# --- Composite fields ---


class OwnershipGroup(BaseModel):
    """Owning organization: ``enterprise.op_group``."""

    model_config = {"frozen": True}

    enterprise: Token
    op_group: Token

    def to_tokens(self) -> list[str]:
        return [self.enterprise, self.op_group]

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> OwnershipGroup:
        _check_arity(SubjectField.OWNERSHIP_GROUP, tokens, 2)
        return _build(
            SubjectField.OWNERSHIP_GROUP, cls, enterprise=tokens[0], op_group=tokens[1]
        )


class ServiceIdentifier(BaseModel):
    """Emitting service instance: ``service_name.instance_id``."""

    model_config = {"frozen": True}

    service_name: Token
    instance_id: Token

    def to_tokens(self) -> list[str]:
        return [self.service_name, self.instance_id]

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> ServiceIdentifier:
        _check_arity(SubjectField.SERVICE_IDENTIFIER, tokens, 2)
        return _build(
            SubjectField.SERVICE_IDENTIFIER, cls, service_name=tokens[0], instance_id=tokens[1]
        )


# --- Geo locator variants ---


class LocalGeo(BaseModel):
    """Sentinel locator: the subject is scoped to the local site."""

    model_config = {"frozen": True}

    kind: Literal["local"] = "local"

    def to_tokens(self) -> list[str]:
        return [LOCAL_TOKEN]


class GlobalGeo(BaseModel):
    """Sentinel locator: the subject is not tied to any region."""

    model_config = {"frozen": True}

    kind: Literal["global"] = "global"

    def to_tokens(self) -> list[str]:
        return [GLOBAL_TOKEN]


class Locator(BaseModel):
    """Explicit locator: ``iso_region_code.op_region.op_identifier``.

    Construction only checks token shape. The region code is checked
    against the ISO 3166-2 table by :meth:`from_tokens`, by
    ``SubjectBuilder.build()``, and by ``Subject`` validation.
    """

    model_config = {"frozen": True}

    kind: Literal["locator"] = "locator"
    iso_region_code: Token
    op_region: Token
    op_identifier: Token

    @field_validator("iso_region_code")
    @classmethod
    def _not_sentinel(cls, value: str) -> str:
        if value in (LOCAL_TOKEN, GLOBAL_TOKEN):
            msg = f"{value!r} is a reserved geo sentinel, not a region code"
            raise ValueError(msg)
        return value

    def to_tokens(self) -> list[str]:
        return [self.iso_region_code, self.op_region, self.op_identifier]

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> Locator:
        _check_arity(SubjectField.GEO_LOCATOR, tokens, LOCATOR_ARITY)
        if not is_valid_region_code(tokens[0]):
            raise InvalidGeoCodeError(tokens[0])
        return cls.create(*tokens)

    @classmethod
    def create(cls, iso_region_code: str, op_region: str, op_identifier: str) -> Locator:
        """Construct without the region lookup, reporting bad tokens as InvalidTokenError."""
        return _build(
            SubjectField.GEO_LOCATOR,
            cls,
            iso_region_code=iso_region_code,
            op_region=op_region,
            op_identifier=op_identifier,
        )


GeoLocator = Annotated[LocalGeo | GlobalGeo | Locator, Field(discriminator="kind")]

LOCAL = LocalGeo()
GLOBAL = GlobalGeo()

_SENTINELS: dict[str, LocalGeo | GlobalGeo] = {LOCAL_TOKEN: LOCAL, GLOBAL_TOKEN: GLOBAL}


def sentinel_geo(token: str) -> LocalGeo | GlobalGeo | None:
    """Return the sentinel locator for *token*, or None if it is not one."""
    return _SENTINELS.get(token)


def geo_locator_from_tokens(tokens: Sequence[str]) -> LocalGeo | GlobalGeo | Locator:
    """Decode a geo locator that owns exactly *tokens* (1 sentinel or 3 explicit)."""
    if len(tokens) == 1:
        sentinel = sentinel_geo(tokens[0])
        if sentinel is not None:
            return sentinel
    return Locator.from_tokens(tokens)


# --- Free-form payload path ---


class PayloadIdentifier(RootModel[tuple[Token, ...]]):
    """Ordered payload path segments appended after the payload type.

    May be empty. Serializes as a plain list of strings.
    """

    model_config = {"frozen": True}

    root: tuple[Token, ...] = ()

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> str:
        return self.root[index]

    def to_tokens(self) -> list[str]:
        return list(self.root)

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> PayloadIdentifier:
        return _build(SubjectField.PAYLOAD_IDENTIFIER, cls, root=tuple(tokens))
