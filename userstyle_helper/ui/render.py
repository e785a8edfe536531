"""
Rich-based renderers for the end-of-build summary.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from userstyle_helper.core.build import BuildResult


def render_build_summary(result: BuildResult, console: Optional[Console] = None) -> None:
    """Render a compact key/value panel for a finished build."""
    console = console or Console(stderr=True)
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(overflow="fold")
    table.add_row("version", result.version)
    table.add_row("namespace", result.namespace)
    table.add_row("manifest", str(result.manifest_path))
    table.add_row("output", str(result.output_path))
    table.add_row("size", f"{result.css_bytes} bytes")
    if result.skipped_writes:
        table.add_row("writes", "[yellow]skipped (USERSTYLE_NO_WRITE=1)[/]")
    console.print(Panel(table, title="UserStyle build", style="bold cyan", expand=False))
