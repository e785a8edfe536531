"""Build helper for UserStyle theme projects: version stamp, header, CSS compile."""
from __future__ import annotations

from userstyle_helper.core.header import render_header
from userstyle_helper.core.manifest import update_manifest
from userstyle_helper.core.version import compute_version

__all__ = ["compute_version", "update_manifest", "render_header"]
