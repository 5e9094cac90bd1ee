"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, subjectctl.toml only contains
overrides. Producer defaults are plain strings; they are decoded by the
subject builder, which reports any invalid value.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- subjectctl.toml sections ---


class DefaultsConfig(BaseModel):
    """[defaults] section: fallbacks for ``subjectctl build`` flags."""

    model_config = {"frozen": True}

    environment: str = "dev"
    enterprise: str | None = None
    op_group: str | None = None
    geo: str = "local"
    service_name: str | None = None
    instance_id: str | None = None
    payload_type: str | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
