"""Rich terminal formatter for McCabe Insight."""

from typing import List

from rich.console import Console
from rich.table import Table

from ..complexity.models import ComplexityRecord
from .base import BaseFormatter

console = Console(stderr=True)


def _complexity_label(complexity: int) -> str:
    # SEI risk bands
    if complexity > 50:
        return "[red bold]untestable[/red bold]"
    elif complexity > 20:
        return "[red]high[/red]"
    elif complexity > 10:
        return "[yellow]moderate[/yellow]"
    else:
        return "[green]low[/green]"


class RichFormatter(BaseFormatter):
    """Table of functions with a risk band per complexity."""

    def __init__(self, output: Console = console) -> None:
        self.console = output

    def render(self, records: List[ComplexityRecord]) -> None:
        if not records:
            self.console.print("[dim]No functions found[/dim]")
            return

        table = Table(title="Cyclomatic complexity", show_lines=False)
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Function")
        table.add_column("Complexity", justify="right", style="bold")
        table.add_column("Risk")

        for r in records:
            name = r.name or "[dim]<anonymous>[/dim]"
            if not r.has_body:
                name += " [dim](declaration)[/dim]"
            table.add_row(str(r.line), name, str(r.complexity), _complexity_label(r.complexity))

        self.console.print(table)
        total = sum(r.complexity for r in records)
        self.console.print(
            f"[bold]{len(records)}[/bold] function(s), "
            f"max [bold]{max(r.complexity for r in records)}[/bold], "
            f"mean [bold]{total / len(records):.2f}[/bold]"
        )

    def format(self, records: List[ComplexityRecord]) -> str:
        # Rich output goes directly to console; return empty string
        self.render(records)
        return ""
