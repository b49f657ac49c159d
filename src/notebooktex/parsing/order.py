"""Recover display order and code visibility from the trailing order block.

The block looks like::

    Cell order:
    # ╠═<id>      code shown
    # ╟─<id>      code folded

and always ends with the two environment cells, which are not displayed.
"""

import logging
from collections.abc import Collection

from notebooktex import MalformedNotebookError
from notebooktex.parsing.tokenizer import (
    CELL_ID_WIDTH,
    ENVIRONMENT_SEGMENTS,
    ORDER_HEADER,
    split_segments,
)

logger = logging.getLogger(__name__)

SHOWN_MARKER = "# ╠═"
FOLDED_MARKER = "# ╟─"


class OrderResolver:
    """Parse the order block into display order and per-cell code visibility."""

    def resolve(
        self, text: str, cell_ids: Collection[str]
    ) -> tuple[list[str], dict[str, bool]]:
        """Resolve display order for a tokenized notebook.

        Args:
            text: Full notebook file contents
            cell_ids: Ids produced by CellTokenizer

        Returns:
            tuple: (display order, mapping of id to code visibility)

        Raises:
            MalformedNotebookError: If an order line is unreadable or the
                referenced ids do not match the tokenized cells one to one
        """
        entries = self._parse_entries(split_segments(text)[-1])
        if len(entries) < ENVIRONMENT_SEGMENTS:
            raise MalformedNotebookError(
                f"Order block lists {len(entries)} cells, expected at least "
                f"the {ENVIRONMENT_SEGMENTS} environment cells"
            )
        entries = entries[:-ENVIRONMENT_SEGMENTS]

        order: list[str] = []
        visibility: dict[str, bool] = {}
        for cell_id, code_visible in entries:
            if cell_id in visibility:
                raise MalformedNotebookError(f"Cell {cell_id} appears twice in the order block")
            order.append(cell_id)
            visibility[cell_id] = code_visible

        self._check_bijection(visibility.keys(), set(cell_ids))
        logger.debug("Resolved display order of %d cells", len(order))
        return order, visibility

    def _parse_entries(self, block: str) -> list[tuple[str, bool]]:
        lines = block.splitlines()
        if not lines or lines[0].strip() != ORDER_HEADER:
            raise MalformedNotebookError(f"Order block must start with '{ORDER_HEADER}'")

        entries: list[tuple[str, bool]] = []
        for lineno, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            if line.startswith(SHOWN_MARKER):
                code_visible = True
            elif line.startswith(FOLDED_MARKER):
                code_visible = False
            else:
                raise MalformedNotebookError(
                    f"Order block line {lineno} has no visibility marker: {line!r}"
                )
            cell_id = line[len(SHOWN_MARKER):len(SHOWN_MARKER) + CELL_ID_WIDTH]
            if len(cell_id.strip()) != CELL_ID_WIDTH:
                raise MalformedNotebookError(
                    f"Order block line {lineno} has an invalid cell id: {line!r}"
                )
            entries.append((cell_id, code_visible))
        return entries

    def _check_bijection(self, ordered: Collection[str], tokenized: set[str]) -> None:
        unknown = [cell_id for cell_id in ordered if cell_id not in tokenized]
        if unknown:
            raise MalformedNotebookError(
                f"Order block references unknown cells: {', '.join(unknown)}"
            )
        missing = sorted(tokenized.difference(ordered))
        if missing:
            raise MalformedNotebookError(
                f"Cells missing from the order block: {', '.join(missing)}"
            )
