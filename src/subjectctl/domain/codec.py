"""Subject wire codec: Subject <-> dotted string.

Wire grammar::

    subject      := environment "." ownership "." geo "." service
                    "." payload_type ("." payload_id)*
    environment  := "prod" | "staging" | "dev"
    ownership    := enterprise "." op_group
    geo          := "local" | "global" | region_code "." op_region "." op_identifier
    service      := service_name "." instance_id
    payload_type := "heartbeat" | "data" | "diagnostics" | "command" | "event" | "custom"
    payload_id   := any-token

The geo locator is the only variable-width field (1 or 3 tokens). It is
resolved by :func:`parse_geo` from its first token alone: a sentinel
keyword wins, anything else is an explicit 3-token locator. There is no
backtracking, so every accepted string has exactly one canonical form.
"""

from __future__ import annotations

from collections.abc import Sequence

from subjectctl.domain.errors import TooShortError
from subjectctl.domain.fields import (
    LOCATOR_ARITY,
    Environment,
    GlobalGeo,
    LocalGeo,
    Locator,
    OwnershipGroup,
    PayloadIdentifier,
    PayloadType,
    ServiceIdentifier,
    sentinel_geo,
)
from subjectctl.domain.subject import Subject
from subjectctl.domain.types import SEPARATOR

# environment(1) + ownership(2) + sentinel geo(1) + service(2) + payload_type(1)
MIN_TOKENS = 7

_GEO_START = 3
# service(2) + payload_type(1) after the geo locator
_TAIL_FIXED = 3


def format_subject(subject: Subject) -> str:
    """Render *subject* as its canonical dotted string. Never fails."""
    return SEPARATOR.join(subject.to_tokens())


def parse_geo(tokens: Sequence[str]) -> tuple[LocalGeo | GlobalGeo | Locator, int]:
    """Decode the geo locator at the head of *tokens*.

    Returns ``(geo_locator, tokens_consumed)``. ``local``/``global``
    consume one token and skip the region lookup. Any other head token
    starts an explicit locator consuming three tokens.

    Raises:
        TooShortError: Fewer tokens remain than the chosen form needs.
        InvalidGeoCodeError: The explicit region code is unknown.
    """
    if not tokens:
        raise TooShortError(required=1, actual=0)
    sentinel = sentinel_geo(tokens[0])
    if sentinel is not None:
        return sentinel, 1
    if len(tokens) < LOCATOR_ARITY:
        raise TooShortError(required=LOCATOR_ARITY, actual=len(tokens))
    return Locator.from_tokens(tokens[:LOCATOR_ARITY]), LOCATOR_ARITY


def parse_subject(text: str) -> Subject:
    """Parse a dotted wire string into a Subject.

    Fields are decoded in wire order and the first failure is raised;
    no partial Subject is ever produced.

    Raises:
        SubjectError: Any subclass, describing the first invalid field.
    """
    tokens = text.split(SEPARATOR)
    if len(tokens) < MIN_TOKENS:
        raise TooShortError(required=MIN_TOKENS, actual=len(tokens))

    environment = Environment.from_tokens(tokens[0:1])
    ownership_group = OwnershipGroup.from_tokens(tokens[1:_GEO_START])
    geo_locator, consumed = parse_geo(tokens[_GEO_START:])

    offset = _GEO_START + consumed
    if len(tokens) < offset + _TAIL_FIXED:
        raise TooShortError(required=offset + _TAIL_FIXED, actual=len(tokens))

    service_identifier = ServiceIdentifier.from_tokens(tokens[offset : offset + 2])
    payload_type = PayloadType.from_tokens(tokens[offset + 2 : offset + 3])
    payload_identifier = PayloadIdentifier.from_tokens(tokens[offset + 3 :])

    return Subject(
        environment=environment,
        ownership_group=ownership_group,
        geo_locator=geo_locator,
        service_identifier=service_identifier,
        payload_type=payload_type,
        payload_identifier=payload_identifier,
    )
