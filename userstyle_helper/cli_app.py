#!/usr/bin/env python3
"""
Build entrypoint for a UserStyle theme project.

Runs end-to-end with no arguments:
- bumps userStyle.version in package.json (YYYYMMDD.HH.MM)
- compiles src/main.scss with libsass
- writes dist/main.css with the ==UserStyle== header prepended

Paths and compiler options come from userstyle.toml / .userstyle.toml and
USERSTYLE_* environment variables (see core/config.py).
"""
from __future__ import annotations

import os
from pathlib import Path

from userstyle_helper.adapters.logging_adapter import make_logger, make_structured_logger
from userstyle_helper.core.build import run_build
from userstyle_helper.core.compiler import CompileError, SourceNotFoundError
from userstyle_helper.core.config import BuildConfig, ConfigError
from userstyle_helper.core.manifest import ManifestError
from userstyle_helper.core.root import discover_root
from userstyle_helper.ui.render import render_build_summary


def main() -> int:
    log = make_logger("userstyle")
    stage_log = make_structured_logger("userstyle", defaults={"tool": "build"}) if os.environ.get("LOG_JSON") == "1" else None
    try:
        config = BuildConfig.load(discover_root(Path.cwd()))
        result = run_build(config, log=log, stage_log=stage_log)
    except (ConfigError, ManifestError, SourceNotFoundError) as exc:
        log(f"Error: {exc}")
        return 1
    except CompileError as exc:
        log(f"Error building CSS: {exc}")
        return 1
    if stage_log is None:
        render_build_summary(result)
    return 0
