"""Assembly of the LaTeX chapter from cells and their outputs."""

from collections.abc import Callable, Mapping
from pathlib import PurePath

from notebooktex.models import Cell, OutputArtifact, ParsedNotebook
from notebooktex.output.classifier import FIGURES_DIR
from notebooktex.output.markdown import markdown_to_latex


class DocumentAssembler:
    """Build the chapter body cell by cell in display order.

    Code visibility and output visibility are independent: a folded cell
    can still show its output, and a shown cell can hide it.
    """

    def __init__(
        self,
        translator: Callable[[str], str] = markdown_to_latex,
        listing_language: str = "PythonLocal",
        listing_style: str = "python",
        figure_width: str = "0.8\\textwidth",
    ):
        """Initialize assembler.

        Args:
            translator: Markdown to LaTeX translation function
            listing_language: lstlisting language option
            listing_style: lstlisting style option
            figure_width: Width option of includegraphics
        """
        self.translator = translator
        self.listing_language = listing_language
        self.listing_style = listing_style
        self.figure_width = figure_width

    def assemble(
        self, notebook: ParsedNotebook, outputs: Mapping[str, OutputArtifact]
    ) -> str:
        """Assemble the chapter.

        Args:
            notebook: Parsed notebook
            outputs: Output artifact of every code cell, keyed by cell id

        Returns:
            str: LaTeX chapter body
        """
        parts = ["\\newpage\n"]
        for cell in notebook.ordered_cells():
            parts.append(self.render_cell(cell, outputs.get(cell.id)))
        return "".join(parts)

    def render_cell(self, cell: Cell, output: OutputArtifact | None) -> str:
        if cell.kind == "markdown":
            return self.translator(cell.markdown_body)

        parts = []
        if cell.code_visible:
            parts.append(self.render_listing(cell.source))
        if cell.output_visible and output is not None:
            parts.append(self.render_output(output))
        return "".join(parts)

    def render_listing(self, source: str) -> str:
        return (
            f"\n\\begin{{lstlisting}}[language={self.listing_language}, "
            f"style={self.listing_style}]\n"
            f"{source.strip()}"
            "\n\\end{lstlisting}\n"
        )

    def render_output(self, output: OutputArtifact) -> str:
        if output.kind == "text":
            return f"\n\\begin{{verbatim}}\n{output.payload}\n\\end{{verbatim}}\n"
        if output.kind == "plot":
            return self.render_figure(f"./{FIGURES_DIR}/{output.payload}", output.payload)
        if output.kind == "image":
            return self.render_figure(output.payload, PurePath(output.payload).name)
        return ""

    def render_figure(self, path: str, label: str) -> str:
        return (
            "\n\\begin{figure}[H]\n"
            "\t\\centering\n"
            f"\t\\includegraphics[width={self.figure_width}]{{{path}}}\n"
            f"\t\\label{{fig:{label}}}\n"
            "\n\\end{figure}\n"
        )
