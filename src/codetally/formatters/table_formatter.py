"""Rich terminal table formatter for codetally."""

import io
from typing import Optional

from rich.console import Console
from rich.table import Table

from ..models import AnalysisResult
from .base import BaseFormatter


class TableFormatter(BaseFormatter):
    """One row per file, sorted by file name."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self.console.print(self._build_table(result))
        if result.name_collisions:
            self.console.print(
                f"[yellow]Warning:[/yellow] {len(result.name_collisions)} file name(s) "
                "are shared by several files; see the Path column"
            )

    def format(self, result: AnalysisResult) -> str:
        console = Console(record=True, width=max(self.console.width, 200), file=io.StringIO())
        console.print(self._build_table(result))
        return console.export_text()

    def _build_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Result", show_lines=False)
        table.add_column("File", style="cyan", no_wrap=True)
        if result.name_collisions:
            table.add_column("Path", style="dim")
        table.add_column("Source Lines", justify="right")
        table.add_column("Source Lines without Getters and Block Comments", justify="right")
        table.add_column("Dependencies")

        for r in result.sorted_reports():
            row = [r.name]
            if result.name_collisions:
                row.append(str(r.path.relative_to(result.root_dir)))
            row.append(_count_cell(r.source_lines.as_int()))
            row.append(_count_cell(r.enhanced_lines.as_int()) if r.enhanced_lines else "-")
            row.append(", ".join(r.dependencies))
            table.add_row(*row)
        return table


def _count_cell(value: int) -> str:
    if value < 0:
        return f"[red]{value}[/red]"
    return str(value)

