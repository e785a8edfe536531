"""
End-to-end build: bump manifest version, compile the stylesheet, write dist CSS.

Step order mirrors the release workflow: the manifest is bumped and persisted
before the source is checked, so a failed compile still leaves a new version.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from userstyle_helper.adapters.logging_adapter import log_stage_end, log_stage_start, make_logger
from userstyle_helper.core.compiler import SourceNotFoundError, compile_stylesheet
from userstyle_helper.core.config import BuildConfig
from userstyle_helper.core.header import header_fields, render_header
from userstyle_helper.core.manifest import lint_manifest, load_manifest, save_manifest, update_manifest
from userstyle_helper.core.version import compute_version


@dataclass(frozen=True)
class BuildResult:
    version: str
    namespace: str
    manifest_path: Path
    output_path: Path
    css_bytes: int
    skipped_writes: bool = False


def run_build(
    config: BuildConfig,
    now: Optional[datetime] = None,
    log: Optional[Callable[[str], None]] = None,
    stage_log: Optional[Callable[[str, dict], None]] = None,
) -> BuildResult:
    log = log or make_logger("userstyle")
    now = now or datetime.now()

    if stage_log:
        log_stage_start(stage_log, "bump", manifest=str(config.manifest))
    manifest = load_manifest(config.manifest)
    for warning in lint_manifest(manifest):
        log(f"warning: manifest {warning}")
    version = compute_version(now)
    manifest = update_manifest(manifest, version, namespace=config.namespace)
    if not config.no_write:
        save_manifest(config.manifest, manifest)
    log(f"Bumped version to {version}")
    if stage_log:
        log_stage_end(stage_log, "bump", version=version)

    if not config.no_write:
        config.output.parent.mkdir(parents=True, exist_ok=True)

    header = render_header(manifest, version)

    if not config.source.is_file():
        raise SourceNotFoundError(f"Source file not found: {config.source}")

    if stage_log:
        log_stage_start(stage_log, "compile", source=str(config.source))
    log("Building CSS...")
    css = compile_stylesheet(config.source, output_style=config.output_style, include_paths=config.include_paths)
    final_css = header + css
    if not config.no_write:
        config.output.write_text(final_css, encoding="utf-8")
    log(f"Build complete: {config.output}" + (" [no-write]" if config.no_write else ""))
    if stage_log:
        log_stage_end(stage_log, "compile", output=str(config.output))

    return BuildResult(
        version=version,
        namespace=dict(header_fields(manifest, version))["namespace"],
        manifest_path=config.manifest,
        output_path=config.output,
        css_bytes=len(final_css.encode("utf-8")),
        skipped_writes=config.no_write,
    )
