"""Locate localeroute.toml.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``LOCALEROUTE_CONFIG`` names a file directly and disables
the walk; ``--config`` bypasses discovery altogether.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "localeroute.toml"
CONFIG_ENV_VAR = "LOCALEROUTE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest localeroute.toml at or above *start* (default: cwd).

    A ``LOCALEROUTE_CONFIG`` pointing at a missing file yields None rather
    than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
