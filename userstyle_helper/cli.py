#!/usr/bin/env python3
"""
Canonical userstyle-build CLI entrypoint.

Implementation lives in userstyle_helper/cli_app.py.
"""
from __future__ import annotations

from .cli_app import main  # re-export


if __name__ == "__main__":
    raise SystemExit(main())
