"""Tests for subject field types and their token encodings."""

import pytest
from pydantic import ValidationError

from subjectctl.domain.errors import (
    InvalidArityError,
    InvalidEnumTokenError,
    InvalidGeoCodeError,
    InvalidTokenError,
)
from subjectctl.domain.fields import (
    GLOBAL,
    LOCAL,
    Environment,
    GlobalGeo,
    LocalGeo,
    Locator,
    OwnershipGroup,
    PayloadIdentifier,
    PayloadType,
    ServiceIdentifier,
    geo_locator_from_tokens,
    sentinel_geo,
)
from subjectctl.domain.types import SubjectField

ENUM_CASES = [
    (Environment, {"prod", "staging", "dev"}),
    (PayloadType, {"heartbeat", "data", "diagnostics", "command", "event", "custom"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_tokens",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_tokens_are_a_bijection(enum_cls: type, expected_tokens: set[str]) -> None:
    """Each member encodes to one token that decodes back to the same member."""
    assert {member.value for member in enum_cls} == expected_tokens
    for member in enum_cls:
        tokens = member.to_tokens()
        assert tokens == [member.value]
        assert enum_cls.from_tokens(tokens) is member


class TestEnvironment:
    def test_production_token(self) -> None:
        assert Environment.PRODUCTION.to_tokens() == ["prod"]

    @pytest.mark.parametrize("token", ["production", "PROD", "Prod", "", "prod "])
    def test_rejects_unknown_token(self, token: str) -> None:
        with pytest.raises(InvalidEnumTokenError) as exc_info:
            Environment.from_tokens([token])
        assert exc_info.value.field is SubjectField.ENVIRONMENT
        assert exc_info.value.value == token

    def test_rejects_wrong_arity(self) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            Environment.from_tokens(["prod", "dev"])
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2


class TestPayloadType:
    def test_rejects_near_miss(self) -> None:
        with pytest.raises(InvalidEnumTokenError) as exc_info:
            PayloadType.from_tokens(["datas"])
        assert exc_info.value.field is SubjectField.PAYLOAD_TYPE
        assert exc_info.value.value == "datas"

    def test_rejects_empty_token_list(self) -> None:
        with pytest.raises(InvalidArityError):
            PayloadType.from_tokens([])


class TestOwnershipGroup:
    def test_round_trip(self) -> None:
        group = OwnershipGroup.from_tokens(["abc", "xyz"])
        assert group.enterprise == "abc"
        assert group.op_group == "xyz"
        assert group.to_tokens() == ["abc", "xyz"]

    @pytest.mark.parametrize("tokens", [["abc"], ["abc", "xyz", "extra"], []])
    def test_wrong_arity(self, tokens: list[str]) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            OwnershipGroup.from_tokens(tokens)
        assert exc_info.value.field is SubjectField.OWNERSHIP_GROUP
        assert exc_info.value.actual == len(tokens)

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            OwnershipGroup.from_tokens(["", "xyz"])
        assert exc_info.value.field is SubjectField.OWNERSHIP_GROUP
        assert exc_info.value.value == ""

    def test_separator_rejected_at_construction(self) -> None:
        with pytest.raises(ValidationError):
            OwnershipGroup(enterprise="a.b", op_group="xyz")

    def test_frozen(self) -> None:
        group = OwnershipGroup(enterprise="abc", op_group="xyz")
        with pytest.raises(ValidationError):
            group.enterprise = "other"  # type: ignore[misc]


class TestServiceIdentifier:
    def test_round_trip(self) -> None:
        service = ServiceIdentifier.from_tokens(["plc-gateway", "1"])
        assert service.service_name == "plc-gateway"
        assert service.instance_id == "1"
        assert service.to_tokens() == ["plc-gateway", "1"]

    def test_wrong_arity(self) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            ServiceIdentifier.from_tokens(["plc-gateway"])
        assert exc_info.value.field is SubjectField.SERVICE_IDENTIFIER
        assert exc_info.value.expected == 2


class TestGeoLocator:
    def test_sentinels(self) -> None:
        assert LOCAL.to_tokens() == ["local"]
        assert GLOBAL.to_tokens() == ["global"]
        assert sentinel_geo("local") == LocalGeo()
        assert sentinel_geo("global") == GlobalGeo()
        assert sentinel_geo("US-CA") is None

    def test_locator_from_tokens(self) -> None:
        locator = Locator.from_tokens(["US-CA", "south", "abc"])
        assert locator.iso_region_code == "US-CA"
        assert locator.op_region == "south"
        assert locator.op_identifier == "abc"
        assert locator.to_tokens() == ["US-CA", "south", "abc"]

    def test_locator_rejects_unknown_region(self) -> None:
        with pytest.raises(InvalidGeoCodeError) as exc_info:
            Locator.from_tokens(["US-AA", "south", "abc"])
        assert exc_info.value.region_code == "US-AA"

    def test_locator_wrong_arity(self) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            Locator.from_tokens(["US-CA", "south"])
        assert exc_info.value.field is SubjectField.GEO_LOCATOR
        assert exc_info.value.expected == 3

    def test_create_skips_region_lookup(self) -> None:
        locator = Locator.create("US-AA", "south", "abc")
        assert locator.iso_region_code == "US-AA"

    @pytest.mark.parametrize("reserved", ["local", "global"])
    def test_locator_cannot_use_sentinel_as_region(self, reserved: str) -> None:
        with pytest.raises(InvalidTokenError):
            Locator.create(reserved, "south", "abc")

    def test_geo_locator_from_tokens(self) -> None:
        assert geo_locator_from_tokens(["local"]) == LOCAL
        assert geo_locator_from_tokens(["global"]) == GLOBAL
        assert isinstance(geo_locator_from_tokens(["US-CA", "south", "abc"]), Locator)

    def test_geo_locator_from_single_non_sentinel(self) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            geo_locator_from_tokens(["US-CA"])
        assert exc_info.value.actual == 1


class TestPayloadIdentifier:
    def test_empty(self) -> None:
        payload = PayloadIdentifier.from_tokens([])
        assert len(payload) == 0
        assert payload.to_tokens() == []

    def test_preserves_order(self) -> None:
        payload = PayloadIdentifier.from_tokens(["system", "sub-system", "sensor"])
        assert list(payload) == ["system", "sub-system", "sensor"]
        assert payload[0] == "system"
        assert len(payload) == 3

    def test_empty_segment_rejected(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            PayloadIdentifier.from_tokens(["system", ""])
        assert exc_info.value.field is SubjectField.PAYLOAD_IDENTIFIER

    def test_segment_with_separator_rejected(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            PayloadIdentifier.from_tokens(["a.b"])
        assert exc_info.value.value == "a.b"
