"""Classification of cell values into chapter outputs.

Two plot families are persisted in their idiomatic format: matplotlib
figures as vector PDF, Pillow images as PNG. Everything else is rendered
as bounded text, so no output is lost.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.figure import Figure
from PIL import Image
from rich.pretty import pretty_repr

from notebooktex.models import EvaluatedResult, FigureCounter, OutputArtifact

logger = logging.getLogger(__name__)

FIGURES_DIR = "figures"


def figure_filename(notebook_name: str, index: int, extension: str) -> str:
    """Deterministic figure file name, e.g. chapter_figure2.pdf."""
    return f"{notebook_name}_figure{index}.{extension}"


def as_matplotlib_figure(value: Any) -> Optional[Figure]:
    """Return the matplotlib figure behind a value, if any.

    Accepts figures, axes and other artists attached to a figure, tuples
    led by a figure as returned by plt.subplots(), and lists of artists
    sharing one figure as returned by plt.plot().
    """
    if isinstance(value, tuple) and value and isinstance(value[0], Figure):
        return value[0]
    if isinstance(value, Figure):
        return value
    if isinstance(value, Artist):
        figure = value.get_figure()
        if isinstance(figure, Figure):
            return figure
        return None
    if isinstance(value, (list, tuple)) and value:
        if not all(isinstance(item, Artist) for item in value):
            return None
        figures = {id(item.get_figure()): item.get_figure() for item in value}
        if len(figures) == 1:
            (figure,) = figures.values()
            if isinstance(figure, Figure):
                return figure
    return None


class OutputClassifier:
    """Turn evaluated cell values into output artifacts.

    One classifier is used per conversion run; its FigureCounter numbers
    saved figures in execution order.
    """

    def __init__(
        self,
        target_dir: Path | str,
        notebook_name: str,
        counter: FigureCounter | None = None,
        text_max_width: int = 80,
        text_max_length: Optional[int] = 100,
        text_max_string: Optional[int] = 1000,
        png_dpi: int = 150,
    ):
        """Initialize classifier.

        Args:
            target_dir: LaTeX project directory; figures go to its figures/
            notebook_name: Prefix of figure file names
            counter: Figure counter for this run (new one if None)
            text_max_width: Line width of text renderings
            text_max_length: Container items shown before truncating
            text_max_string: String characters shown before truncating
            png_dpi: Resolution of PNG figures
        """
        # Resolved now: cells may change the working directory later
        self.figures_dir = Path(target_dir).resolve() / FIGURES_DIR
        self.notebook_name = notebook_name
        self.counter = counter or FigureCounter()
        self.text_max_width = text_max_width
        self.text_max_length = text_max_length
        self.text_max_string = text_max_string
        self.png_dpi = png_dpi

    def classify(self, result: EvaluatedResult) -> OutputArtifact:
        """Classify one evaluated result.

        Args:
            result: Value (or embedded image path) of a code cell

        Returns:
            OutputArtifact: none, text, plot or image
        """
        if result.image_path is not None:
            return OutputArtifact.image(result.image_path)

        value = result.value
        if value is None:
            return OutputArtifact.none()

        figure = as_matplotlib_figure(value)
        if figure is not None:
            filename = self._next_filename("pdf")
            figure.savefig(self.figures_dir / filename)
            plt.close(figure)
            logger.info("Saved figure %s from cell %s", filename, result.cell_id)
            return OutputArtifact.plot(filename)

        if isinstance(value, Image.Image):
            filename = self._next_filename("png")
            self._save_raster(value, self.figures_dir / filename)
            logger.info("Saved figure %s from cell %s", filename, result.cell_id)
            return OutputArtifact.plot(filename)

        return OutputArtifact.text(self.render_text(value))

    def render_text(self, value: Any) -> str:
        """Render a value the way an interactive console would display it."""
        return pretty_repr(
            value,
            max_width=self.text_max_width,
            max_length=self.text_max_length,
            max_string=self.text_max_string,
        )

    def _next_filename(self, extension: str) -> str:
        return figure_filename(self.notebook_name, self.counter.next(), extension)

    def _save_raster(self, image: Image.Image, path: Path) -> None:
        # PNG has no CMYK support
        if image.mode not in ("1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"):
            image = image.convert("RGBA")
        image.save(path, format="PNG", dpi=(self.png_dpi, self.png_dpi))
