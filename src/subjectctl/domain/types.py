"""Subject field names and wire-format constants."""

from __future__ import annotations

from enum import StrEnum

SEPARATOR = "."

# Reserved geo-locator sentinels; never valid as a locator region code.
LOCAL_TOKEN = "local"
GLOBAL_TOKEN = "global"


class SubjectField(StrEnum):
    """The six fields of a subject, in wire order."""

    ENVIRONMENT = "environment"
    OWNERSHIP_GROUP = "ownership_group"
    GEO_LOCATOR = "geo_locator"
    SERVICE_IDENTIFIER = "service_identifier"
    PAYLOAD_TYPE = "payload_type"
    PAYLOAD_IDENTIFIER = "payload_identifier"
