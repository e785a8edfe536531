"""Project root discovery and overrides."""
from __future__ import annotations

import os
from pathlib import Path

ROOT_MARKERS = ("package.json", ".git")


def discover_root(start: Path) -> Path:
    """Walk up to the first directory holding package.json or .git; fallback to start."""
    env_root = os.environ.get("USERSTYLE_ROOT")
    if env_root:
        return Path(env_root).resolve()
    current = start.resolve()
    for parent in [current] + list(current.parents):
        if any((parent / marker).exists() for marker in ROOT_MARKERS):
            return parent
    return current
