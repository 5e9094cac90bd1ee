"""SubjectService: parse, build, convert, and geo-check subjects.

Wraps the domain codec and builder into the ServiceResult contract.
Domain errors become ``ServiceError`` payloads carrying the error's
``code`` and ``detail``; nothing is raised to the caller.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from subjectctl.config.models import DefaultsConfig
from subjectctl.domain.builder import SubjectBuilder
from subjectctl.domain.codec import format_subject, parse_subject
from subjectctl.domain.errors import InvalidGeoCodeError, SubjectError
from subjectctl.domain.fields import LOCATOR_ARITY, geo_locator_from_tokens
from subjectctl.domain.geo import describe_region
from subjectctl.domain.subject import Subject
from subjectctl.domain.types import SEPARATOR
from subjectctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _subject_data(subject: Subject) -> dict[str, Any]:
    return {"subject": format_subject(subject), **subject.to_dict()}


def _or_default(value: str | None, default: str | None) -> str | None:
    """Fall back only when *value* was omitted; an empty string is kept."""
    return value if value is not None else default


def _error_result(op: str, exc: SubjectError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail),
    )


class SubjectService:
    """Subject operations for the CLI.

    *defaults* supplies fallbacks for :meth:`build` arguments left as None.
    """

    def __init__(self, defaults: DefaultsConfig | None = None) -> None:
        self._defaults = defaults or DefaultsConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ServiceResult:
        """Parse a wire string into its structured form."""
        op = "parse_subject"
        try:
            subject = parse_subject(text)
        except SubjectError as exc:
            logger.debug("Rejected subject %r: %s", text, exc)
            return _error_result(op, exc)
        return ServiceResult(ok=True, op=op, data=_subject_data(subject))

    def build(
        self,
        *,
        environment: str | None = None,
        enterprise: str | None = None,
        op_group: str | None = None,
        geo: str | None = None,
        service_name: str | None = None,
        instance_id: str | None = None,
        payload_type: str | None = None,
        payload_path: Sequence[str] = (),
    ) -> ServiceResult:
        """Build a subject from plain values, falling back to configured defaults.

        *geo* is ``local``, ``global``, or a dotted explicit locator such
        as ``US-CA.south.abc``.
        """
        op = "build_subject"
        d = self._defaults
        environment = _or_default(environment, d.environment)
        enterprise = _or_default(enterprise, d.enterprise)
        op_group = _or_default(op_group, d.op_group)
        geo = _or_default(geo, d.geo)
        service_name = _or_default(service_name, d.service_name)
        instance_id = _or_default(instance_id, d.instance_id)
        payload_type = _or_default(payload_type, d.payload_type)

        builder = SubjectBuilder()
        try:
            if environment is not None:
                builder.environment(environment)
            if enterprise is not None and op_group is not None:
                builder.owner(enterprise, op_group)
            if geo is not None:
                geo_tokens = geo.split(SEPARATOR)
                if len(geo_tokens) == LOCATOR_ARITY:
                    builder.locator(*geo_tokens)
                else:
                    builder.geo_locator(geo_locator_from_tokens(geo_tokens))
            if service_name is not None and instance_id is not None:
                builder.service(service_name, instance_id)
            if payload_type is not None:
                builder.payload_type(payload_type)
            builder.payload_identifier(payload_path)
            subject = builder.build()
        except SubjectError as exc:
            logger.debug("Subject build failed: %s", exc)
            return _error_result(op, exc)
        return ServiceResult(ok=True, op=op, data=_subject_data(subject))

    def from_structured(self, data: dict[str, Any] | str) -> ServiceResult:
        """Convert the structured (dict or JSON text) form to a wire string."""
        op = "format_subject"
        try:
            if isinstance(data, str):
                subject = Subject.model_validate_json(data)
            else:
                subject = Subject.from_dict(data)
        except ValidationError as exc:
            logger.debug("Rejected structured subject: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_STRUCTURE",
                    message=f"Invalid structured subject ({exc.error_count()} error(s))",
                    detail={"errors": json.loads(exc.json(include_url=False))},
                ),
            )
        return ServiceResult(ok=True, op=op, data=_subject_data(subject))

    def check_geo(self, code: str) -> ServiceResult:
        """Look up an ISO 3166-2 region code."""
        op = "check_geo"
        region = describe_region(code)
        if region is None:
            return _error_result(op, InvalidGeoCodeError(code))
        return ServiceResult(ok=True, op=op, data=region)
