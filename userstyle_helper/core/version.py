"""Timestamp-derived UserStyle version strings."""
from __future__ import annotations

import re
from datetime import datetime

VERSION_PATTERN = re.compile(r"^\d{8}\.\d{2}\.\d{2}$")


def compute_version(now: datetime) -> str:
    """
    Format `now` as YYYYMMDD.HH.MM using its wall-clock fields.

    Runs within the same minute yield the same version.
    """
    return f"{now.year:04d}{now.month:02d}{now.day:02d}.{now.hour:02d}.{now.minute:02d}"
