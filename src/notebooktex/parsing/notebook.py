"""Reactive notebook parsing functionality."""

import logging
from pathlib import Path

from notebooktex import NotebookParseError
from notebooktex.models import Cell, NotebookSource, ParsedNotebook
from notebooktex.parsing.order import OrderResolver
from notebooktex.parsing.tokenizer import CellTokenizer

logger = logging.getLogger(__name__)


class NotebookParser:
    """Parser for cell-delimited reactive notebooks.

    Combines CellTokenizer and OrderResolver into frozen, ordered cells.
    """

    def __init__(
        self,
        tokenizer: CellTokenizer | None = None,
        resolver: OrderResolver | None = None,
    ):
        self.tokenizer = tokenizer or CellTokenizer()
        self.resolver = resolver or OrderResolver()

    def parse(self, filepath: Path | str) -> ParsedNotebook:
        """Parse a notebook file.

        Args:
            filepath: Path to the notebook

        Returns:
            ParsedNotebook: Parsed notebook structure

        Raises:
            NotebookParseError: If the file cannot be read
            MalformedNotebookError: If the file layout is broken
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise NotebookParseError(f"Notebook file not found: {filepath}")

        try:
            text = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NotebookParseError(f"Failed to read notebook {filepath}: {e}") from e

        return self.parse_source(NotebookSource(path=filepath, text=text))

    def parse_source(self, source: NotebookSource) -> ParsedNotebook:
        """Parse notebook text that has already been read."""
        raw_cells = self.tokenizer.tokenize(source.text)
        order, code_visibility = self.resolver.resolve(
            source.text, [cell.id for cell in raw_cells]
        )

        cells = [
            Cell(**raw.model_dump(), code_visible=code_visibility[raw.id])
            for raw in raw_cells
        ]
        logger.info("Parsed %s: %d cells", source.path, len(cells))
        return ParsedNotebook(source=source, cells=cells, display_order=order)
