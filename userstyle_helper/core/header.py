"""Render the ==UserStyle== metadata block prepended to compiled CSS."""
from __future__ import annotations

from typing import Any, List, Mapping, Tuple

DEFAULT_DESCRIPTION = "No description provided."
DEFAULT_AUTHOR = "Unknown"
DEFAULT_LICENSE = "UNLICENSED"

HEADER_OPEN = "/* ==UserStyle=="
HEADER_CLOSE = "==/UserStyle== */"
LABEL_WIDTH = 13


def _text(value: Any, default: str = "") -> str:
    # JS falsy values: null, "", false, 0
    if value is None or value == "" or value is False or (value == 0 and not isinstance(value, bool)):
        return default
    return str(value)


def _author(value: Any) -> str:
    # npm person objects: {"name": ..., "email": ..., "url": ...}
    if isinstance(value, Mapping):
        parts = [_text(value.get("name"))]
        if value.get("email"):
            parts.append(f"<{value['email']}>")
        if value.get("url"):
            parts.append(f"({value['url']})")
        return _text(" ".join(p for p in parts if p), DEFAULT_AUTHOR)
    return _text(value, DEFAULT_AUTHOR)


def _repository_url(value: Any) -> str:
    if isinstance(value, Mapping):
        return _text(value.get("url"))
    return _text(value)


def header_fields(manifest: Mapping[str, Any], version: str) -> List[Tuple[str, str]]:
    user_style = manifest.get("userStyle")
    namespace = user_style.get("namespace") if isinstance(user_style, Mapping) else None
    return [
        ("name", _text(manifest.get("name"))),
        ("version", version),
        ("namespace", _text(namespace)),
        ("description", _text(manifest.get("description"), DEFAULT_DESCRIPTION)),
        ("author", _author(manifest.get("author"))),
        ("github", _repository_url(manifest.get("repository"))),
        ("homepageURL", _text(manifest.get("homepage"))),
        ("license", _text(manifest.get("license"), DEFAULT_LICENSE)),
    ]


def render_header(manifest: Mapping[str, Any], version: str) -> str:
    """
    Build the header block from `manifest` and the freshly computed `version`.

    Labels are padded to a fixed column; empty values keep the trailing padding.
    The block ends with a blank line so it can be concatenated directly with CSS.
    """
    lines = [HEADER_OPEN]
    for key, value in header_fields(manifest, version):
        lines.append(f"{'@' + key:<{LABEL_WIDTH}} {value}")
    lines.append(HEADER_CLOSE)
    return "\n".join(lines) + "\n\n"
