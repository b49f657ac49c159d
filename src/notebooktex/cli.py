"""Command-line interface for notebooktex."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from notebooktex import NotebookTexError, __version__
from notebooktex.config import get_config
from notebooktex.converter import notebook_to_latex
from notebooktex.logging_config import setup_logging
from notebooktex.parsing import NotebookParser
from notebooktex.preview import NotebookPreview
from notebooktex.project import ProjectScaffolder
from notebooktex.templates import MAIN_TEMPLATES

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """notebooktex - Turn reactive notebooks into LaTeX book chapters."""
    setup_logging(verbose=verbose)


@main.command()
@click.argument("notebook", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--target-dir",
    "-t",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="LaTeX project directory (default: from config or ./build_latex)",
)
@click.option(
    "--template",
    type=click.Choice(sorted(MAIN_TEMPLATES)),
    default=None,
    help="Template for main.tex (default: from config or book)",
)
@click.option(
    "--font-path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory with .ttf fonts for code listings",
)
def convert(
    notebook: Path,
    target_dir: Optional[Path],
    template: Optional[str],
    font_path: Optional[Path],
):
    """Convert a notebook into a chapter of a LaTeX book.

    NOTEBOOK: Path to the notebook file
    """
    try:
        config = get_config()
        target = target_dir or Path(config.target_dir)

        console.print(
            Panel.fit(
                f"[bold cyan]notebooktex[/bold cyan] v{__version__}\n"
                f"Converting: [yellow]{notebook.name}[/yellow]\n"
                f"Project: [dim]{target}[/dim]",
                border_style="cyan",
            )
        )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("[cyan]Executing cells and writing chapter...", total=None)
            result = notebook_to_latex(
                notebook,
                target,
                template=template,
                font_path=font_path,
                config=config,
            )

        console.print()
        console.print(
            Panel.fit(
                f"[green]Success![/green]\n\n"
                f"Cells: [bold]{len(result.notebook.cells)}[/bold], "
                f"figures: [bold]{len(result.figures)}[/bold]\n\n"
                f"Chapter: [yellow]{result.chapter_path}[/yellow]",
                border_style="green",
                title=f"[bold green]{result.notebook.name}[/bold green]",
            )
        )

    except NotebookTexError as e:
        console.print()
        console.print(
            Panel.fit(
                f"[red]Error:[/red] {e}",
                border_style="red",
                title="[bold red]Conversion Failed[/bold red]",
            )
        )
        sys.exit(1)


@main.command()
@click.argument("notebook", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(notebook: Path):
    """Show the cells of a notebook in display order.

    NOTEBOOK: Path to the notebook file
    """
    try:
        parsed = NotebookParser().parse(notebook)
    except NotebookTexError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    NotebookPreview(console=console).show(parsed)


@main.command()
@click.argument("target_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--template",
    type=click.Choice(sorted(MAIN_TEMPLATES)),
    default="book",
    help="Template for main.tex (default: book)",
)
@click.option(
    "--font-path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory with .ttf fonts for code listings",
)
def init(target_dir: Path, template: str, font_path: Optional[Path]):
    """Create an empty LaTeX book project.

    TARGET_DIR: Directory of the new project
    """
    try:
        project = ProjectScaffolder().create_project(
            target_dir, template=template, font_path=font_path
        )
    except NotebookTexError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    console.print(f"[green]Created[/green] {template} project in [yellow]{project}[/yellow]")


@main.command()
def config_show():
    """Show current configuration."""
    try:
        config = get_config()
    except Exception as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)

    console.print(Panel.fit("[bold cyan]notebooktex Configuration[/bold cyan]", border_style="cyan"))
    console.print()
    console.print(f"[cyan]Target Dir:[/cyan] {config.target_dir}")
    console.print(f"[cyan]Template:[/cyan] {config.template}")
    console.print(f"[cyan]Font Path:[/cyan] {config.font_path or 'default font'}")
    console.print(f"[cyan]Figure Width:[/cyan] {config.figure_width}")
    console.print(f"[cyan]Listing:[/cyan] {config.listing_language} / {config.listing_style}")
    console.print(f"[cyan]Text Limits:[/cyan] width {config.text_max_width}, "
                  f"{config.text_max_length} items, {config.text_max_string} chars")
    console.print(f"[cyan]PNG DPI:[/cyan] {config.png_dpi}")


if __name__ == "__main__":
    main()
