"""Split cell-delimited notebook text into raw cells."""

import logging

from notebooktex import MalformedNotebookError
from notebooktex.models import RawCell
from notebooktex.models.notebook import MARKDOWN_OPEN

logger = logging.getLogger(__name__)

CELL_DELIMITER = "# ╔═╡ "
CELL_ID_WIDTH = 36
ORDER_HEADER = "Cell order:"

# Segments that are not notebook cells: the file header before the first
# delimiter, then the project and manifest cells and the order block.
HEADER_SEGMENTS = 1
ENVIRONMENT_SEGMENTS = 2
TRAILING_SEGMENTS = ENVIRONMENT_SEGMENTS + 1


def split_segments(text: str) -> list[str]:
    """Split notebook text on the cell delimiter and check the layout.

    Raises:
        MalformedNotebookError: If the header, environment cells or the
            trailing order block are missing
    """
    segments = text.split(CELL_DELIMITER)
    minimum = HEADER_SEGMENTS + TRAILING_SEGMENTS
    if len(segments) < minimum:
        raise MalformedNotebookError(
            f"Expected at least {minimum} delimited segments, found {len(segments)}"
        )
    if not segments[-1].startswith(ORDER_HEADER):
        first_line = segments[-1].split("\n", 1)[0]
        raise MalformedNotebookError(
            f"Last segment must start with '{ORDER_HEADER}', found: {first_line!r}"
        )
    return segments


class CellTokenizer:
    """Recover raw cells from the text of a notebook.

    Pure parsing: the order block and environment cells are left to
    OrderResolver.
    """

    def tokenize(self, text: str) -> list[RawCell]:
        """Tokenize notebook text into cells in storage order.

        Args:
            text: Full notebook file contents

        Returns:
            list[RawCell]: One entry per notebook cell

        Raises:
            MalformedNotebookError: On a broken layout, a short id or a
                duplicate id
        """
        segments = split_segments(text)
        cells: list[RawCell] = []
        seen: set[str] = set()

        for position, segment in enumerate(segments[HEADER_SEGMENTS:-TRAILING_SEGMENTS]):
            cell = self._tokenize_segment(segment, position)
            if cell.id in seen:
                raise MalformedNotebookError(f"Duplicate cell id: {cell.id}")
            seen.add(cell.id)
            cells.append(cell)

        logger.debug("Tokenized %d cells", len(cells))
        return cells

    def _tokenize_segment(self, segment: str, position: int) -> RawCell:
        id_line, _, source = segment.partition("\n")
        cell_id = id_line[:CELL_ID_WIDTH]
        if len(cell_id.strip()) != CELL_ID_WIDTH:
            raise MalformedNotebookError(
                f"Cell {position + 1} has an invalid id line: {id_line!r}"
            )

        kind = "markdown" if source.lstrip().startswith(MARKDOWN_OPEN) else "code"
        return RawCell(
            id=cell_id,
            source=source,
            kind=kind,
            suppress_output=segment.rstrip().endswith(";"),
        )
