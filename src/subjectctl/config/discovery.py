"""Locate ``subjectctl.toml``.

``SUBJECTCTL_CONFIG`` names the file directly; otherwise the nearest
``subjectctl.toml`` in the working directory or one of its ancestors is
used, so a producer repo can pin its subject defaults at its root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "subjectctl.toml"
CONFIG_ENV_VAR = "SUBJECTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    An env override pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
