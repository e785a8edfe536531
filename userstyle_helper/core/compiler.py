"""Stylesheet compilation via libsass."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import sass

OUTPUT_STYLES = ("nested", "expanded", "compact", "compressed")


class SourceNotFoundError(FileNotFoundError):
    """Raised when the stylesheet source file does not exist."""


class CompileError(RuntimeError):
    """Raised when the stylesheet compiler rejects the source."""


def compile_stylesheet(
    source: Path,
    output_style: str = "expanded",
    include_paths: Iterable[Path] = (),
) -> str:
    """
    Compile `source` by filename so relative imports resolve from its directory.
    """
    if output_style not in OUTPUT_STYLES:
        raise ValueError(f"unknown output_style '{output_style}' (expected one of {', '.join(OUTPUT_STYLES)})")
    if not source.is_file():
        raise SourceNotFoundError(f"Source file not found: {source}")
    paths = [str(source.parent)] + [str(p) for p in include_paths]
    try:
        return sass.compile(filename=str(source), include_paths=paths, output_style=output_style)
    except sass.CompileError as exc:
        raise CompileError(str(exc)) from exc
