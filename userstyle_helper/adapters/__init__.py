"""Adapters facade for userstyle_helper (logging)."""
from __future__ import annotations

from userstyle_helper.adapters.logging_adapter import (
    log_stage_end,
    log_stage_start,
    make_logger,
    make_structured_logger,
)

__all__ = [
    "make_logger",
    "make_structured_logger",
    "log_stage_start",
    "log_stage_end",
]
