"""
Logging adapter: helpers for consistent progress/error output with optional redaction.

Config:
- Env: LOG_JSON=1 for JSON lines; LOG_REDACT=1 to mask secrets; LOG_REDACT_VALUES=secret1,secret2 to redact.

Usage:
- `log = make_logger(prefix="build"); log("Building CSS...")`
- `slog = make_structured_logger(prefix="build", defaults={"tool": "userstyle"}); slog("stage_end", {"status": "ok"})`

Notes:
- Side effects: writes to stderr.
- Home paths are shortened to ~.
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Callable, Optional

__all__ = [
    "make_logger",
    "make_structured_logger",
    "log_stage_start",
    "log_stage_end",
]


def make_logger(
    prefix: str = "",
    redact: bool | None = None,
    secrets: Optional[list] = None,
    json_output: Optional[bool] = None,
) -> Callable[[str], None]:
    """
    Create a logger function. Optionally redact known secrets (naive string replace).

    None for redact/secrets/json_output means "read from the environment at call time".
    """
    home = str(Path.home())
    pref = f"[{prefix}]" if prefix else ""
    if redact is None:
        redact = os.environ.get("LOG_REDACT", "0") == "1"
    if secrets is None:
        secrets = [v for v in os.environ.get("LOG_REDACT_VALUES", "").split(",") if v]
    if json_output is None:
        json_output = os.environ.get("LOG_JSON", "0") == "1"

    def _log(msg: str) -> None:
        sanitized = msg.replace(home, "~") if home and home != "/" else msg
        if redact:
            for s in secrets:
                if s:
                    sanitized = sanitized.replace(s, "***")
        if json_output:
            payload = {"prefix": prefix, "message": sanitized}
            print(json.dumps(payload), file=sys.stderr)
        else:
            print(f"{pref} {sanitized}".strip(), file=sys.stderr)

    return _log


def make_structured_logger(prefix: str = "", defaults: Optional[dict] = None) -> Callable[[str, dict], None]:
    """
    Emit structured JSON logs with a consistent schema: {prefix,event,...fields}.
    Defaults are merged into each log line.
    """
    defaults = defaults or {}

    def _log(event: str, fields: Optional[dict] = None) -> None:
        payload = {"prefix": prefix, "event": event}
        payload.update(defaults)
        if fields:
            payload.update(fields)
        print(json.dumps(payload, default=str), file=sys.stderr)

    return _log


def log_stage_start(logger: Callable, stage: str, **fields) -> None:
    """
    Emit a stage_start event (structured if possible, fallback to plain text).
    """
    payload = {"stage": stage}
    payload.update(fields)
    try:
        logger("stage_start", payload)
    except TypeError:
        logger(f"[stage_start] stage={stage} {payload}")


def log_stage_end(logger: Callable, stage: str, status: str = "ok", **fields) -> None:
    payload = {"stage": stage, "status": status}
    payload.update(fields)
    try:
        logger("stage_end", payload)
    except TypeError:
        logger(f"[stage_end] stage={stage} status={status} {payload}")
