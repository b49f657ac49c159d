"""Terminal preview of parsed notebooks using Rich."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from notebooktex.models import ParsedNotebook

SOURCE_PREVIEW_LENGTH = 50


class NotebookPreview:
    """Show how a notebook's cells will be laid out in the chapter."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize terminal preview.

        Args:
            console: Rich console to use (creates new if None)
        """
        self.console = console or Console()

    def show(self, notebook: ParsedNotebook) -> None:
        """Print a summary panel and a table of cells in display order."""
        code_cells = notebook.code_cells()
        self.console.print()
        self.console.print(
            Panel.fit(
                f"[bold cyan]{notebook.name}[/bold cyan]\n\n"
                f"Cells: [bold]{len(notebook.cells)}[/bold] "
                f"([bold]{len(code_cells)}[/bold] code)\n"
                f"Source: [dim]{notebook.source.path}[/dim]",
                border_style="cyan",
                title="[bold]Notebook[/bold]",
            )
        )
        self.console.print()
        self.console.print(self.build_table(notebook))

    def build_table(self, notebook: ParsedNotebook) -> Table:
        table = Table(title="Display order", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Cell", style="cyan", no_wrap=True)
        table.add_column("Kind")
        table.add_column("Code", justify="center")
        table.add_column("Output", justify="center")
        table.add_column("Source")

        for position, cell in enumerate(notebook.ordered_cells(), start=1):
            if cell.kind == "markdown":
                code, output = "-", "-"
            else:
                code = "[green]shown[/green]" if cell.code_visible else "[yellow]folded[/yellow]"
                output = "[green]shown[/green]" if cell.output_visible else "[yellow]hidden[/yellow]"
            table.add_row(
                str(position),
                cell.id[:8],
                cell.kind,
                code,
                output,
                Text(self._first_line(cell.source)),
            )
        return table

    def _first_line(self, source: str) -> str:
        line = next((s for s in source.strip().splitlines() if s.strip()), "")
        if len(line) > SOURCE_PREVIEW_LENGTH:
            return line[: SOURCE_PREVIEW_LENGTH - 3] + "..."
        return line
