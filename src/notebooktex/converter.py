"""Notebook to LaTeX conversion pipeline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from notebooktex import UnsupportedExtensionError, UnsupportedFormatError
from notebooktex.config import NotebookTexConfig, get_config
from notebooktex.execution import EvaluationScope, Evaluator, ExecutionEngine
from notebooktex.models import FigureCounter, OutputArtifact, ParsedNotebook
from notebooktex.output import ChapterWriter, DocumentAssembler, OutputClassifier
from notebooktex.parsing import NotebookParser
from notebooktex.project import ProjectScaffolder

logger = logging.getLogger(__name__)

PLUTO_SUFFIX = ".py"
JUPYTER_SUFFIX = ".ipynb"


@dataclass
class ConversionResult:
    """Outcome of converting one notebook."""

    notebook: ParsedNotebook
    chapter_path: Path
    outputs: dict[str, OutputArtifact] = field(default_factory=dict)

    @property
    def figures(self) -> list[str]:
        """File names of the figures saved for this chapter."""
        return [o.payload for o in self.outputs.values() if o.kind == "plot"]


def collect_outputs(
    notebook: ParsedNotebook,
    target_dir: Path | str,
    evaluator: Evaluator | None = None,
    config: Optional[NotebookTexConfig] = None,
) -> dict[str, OutputArtifact]:
    """Execute the code cells in display order and classify their values.

    A fresh scope and figure counter are used on every call, so repeated
    runs produce the same figure names.

    Args:
        notebook: Parsed notebook
        target_dir: LaTeX project directory (its figures/ must exist)
        evaluator: Cell evaluator (Python by default)
        config: Configuration (global config if None)

    Returns:
        dict[str, OutputArtifact]: Output of each code cell, keyed by id

    Raises:
        EvaluationError: If any cell fails
    """
    config = config or get_config()
    classifier = OutputClassifier(
        target_dir,
        notebook.name,
        FigureCounter(),
        text_max_width=config.text_max_width,
        text_max_length=config.text_max_length,
        text_max_string=config.text_max_string,
        png_dpi=config.png_dpi,
    )
    engine = ExecutionEngine(evaluator)
    scope = EvaluationScope()

    outputs: dict[str, OutputArtifact] = {}
    results = engine.iter_run(notebook.ordered_cells(), scope, notebook.directory)
    try:
        for result in results:
            outputs[result.cell_id] = classifier.classify(result)
    finally:
        results.close()
        # pyplot's figure registry outlives the scope of this run
        plt.close("all")
    return outputs


def pluto_to_latex(
    notebook: Path | str,
    target_dir: Optional[Path | str] = None,
    template: Optional[str] = None,
    font_path: Optional[Path | str] = None,
    config: Optional[NotebookTexConfig] = None,
    evaluator: Evaluator | None = None,
) -> ConversionResult:
    """Convert a cell-delimited reactive notebook into a book chapter.

    The notebook is parsed before anything is written, and the chapter is
    only written once every cell has executed.

    Args:
        notebook: Path to the notebook
        target_dir: LaTeX project directory (config default if None)
        template: 'book' or 'mathbook' (config default if None)
        font_path: Directory with .ttf fonts for listings
        config: Configuration (global config if None)
        evaluator: Cell evaluator (Python by default)

    Returns:
        ConversionResult: Parsed notebook, chapter path and outputs
    """
    config = config or get_config()
    target_dir = Path(target_dir or config.target_dir)
    template = template or config.template
    font_path = font_path or config.font_path

    parsed = NotebookParser().parse(notebook)
    ProjectScaffolder().create_project(target_dir, template=template, font_path=font_path)

    outputs = collect_outputs(parsed, target_dir, evaluator=evaluator, config=config)
    assembler = DocumentAssembler(
        listing_language=config.listing_language,
        listing_style=config.listing_style,
        figure_width=config.figure_width,
    )
    body = assembler.assemble(parsed, outputs)
    chapter_path = ChapterWriter().write(target_dir, parsed.name, body)

    logger.info("Wrote chapter %s", chapter_path)
    return ConversionResult(notebook=parsed, chapter_path=chapter_path, outputs=outputs)


def notebook_to_latex(
    notebook: Path | str,
    target_dir: Optional[Path | str] = None,
    template: Optional[str] = None,
    font_path: Optional[Path | str] = None,
    config: Optional[NotebookTexConfig] = None,
) -> ConversionResult:
    """Convert a notebook, choosing the reader from its file extension.

    Raises:
        UnsupportedFormatError: For Jupyter notebooks
        UnsupportedExtensionError: For any other unknown extension
    """
    suffix = Path(notebook).suffix
    if suffix == PLUTO_SUFFIX:
        return pluto_to_latex(
            notebook, target_dir, template=template, font_path=font_path, config=config
        )
    if suffix == JUPYTER_SUFFIX:
        raise UnsupportedFormatError(f"Jupyter notebooks are not implemented yet: {notebook}")
    raise UnsupportedExtensionError(
        f"Unsupported notebook extension '{suffix}': {notebook} "
        f"(expected {PLUTO_SUFFIX} or {JUPYTER_SUFFIX})"
    )
