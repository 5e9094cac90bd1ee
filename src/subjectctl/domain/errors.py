"""Subject error taxonomy.

Every parse or build failure raises a :class:`SubjectError` subclass.
Each carries a stable ``code`` and a ``detail`` dict so the service layer
can turn it into a ``ServiceError`` without inspecting the message.

INVARIANT: Formatting a Subject never raises.
"""

from __future__ import annotations

from typing import Any

from subjectctl.domain.types import SubjectField


class SubjectError(Exception):
    """Base class for all subject parse/build failures."""

    code: str = "SUBJECT_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: dict[str, Any] = detail


class InvalidEnumTokenError(SubjectError):
    """A fixed-vocabulary field received an unrecognized token."""

    code = "INVALID_ENUM_TOKEN"

    def __init__(self, field: SubjectField, value: str) -> None:
        super().__init__(
            f"Invalid {field.value} token: {value!r}",
            field=field.value,
            value=value,
        )
        self.field = field
        self.value = value


class InvalidArityError(SubjectError):
    """A field received the wrong number of tokens."""

    code = "INVALID_ARITY"

    def __init__(self, field: SubjectField, expected: int, actual: int) -> None:
        super().__init__(
            f"{field.value} expects {expected} token(s), got {actual}",
            field=field.value,
            expected=expected,
            actual=actual,
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class InvalidTokenError(SubjectError):
    """A free-form token was empty or contained the separator."""

    code = "INVALID_TOKEN"

    def __init__(self, field: SubjectField, value: str) -> None:
        super().__init__(
            f"Invalid {field.value} token: {value!r} (must be non-empty, without '.')",
            field=field.value,
            value=value,
        )
        self.field = field
        self.value = value


class TooShortError(SubjectError):
    """Not enough tokens to cover the fixed-width fields."""

    code = "TOO_SHORT"

    def __init__(self, required: int, actual: int) -> None:
        super().__init__(
            f"Subject too short: need at least {required} token(s), got {actual}",
            required=required,
            actual=actual,
        )
        self.required = required
        self.actual = actual


class InvalidGeoCodeError(SubjectError):
    """An explicit locator's region code is not a known ISO-3166-2 code."""

    code = "INVALID_GEO_CODE"

    def __init__(self, region_code: str) -> None:
        super().__init__(
            f"Unknown ISO 3166-2 region code: {region_code!r}",
            region_code=region_code,
        )
        self.region_code = region_code


class MissingFieldError(SubjectError):
    """``SubjectBuilder.build()`` was called before a field was set."""

    code = "MISSING_FIELD"

    def __init__(self, field: SubjectField) -> None:
        super().__init__(f"Missing required field: {field.value}", field=field.value)
        self.field = field


class BuilderConsumedError(SubjectError):
    """``SubjectBuilder.build()`` was called more than once."""

    code = "BUILDER_CONSUMED"

    def __init__(self) -> None:
        super().__init__("SubjectBuilder has already been consumed by build()")
