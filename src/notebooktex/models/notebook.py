"""Data models for notebook parsing and representation."""

from pathlib import Path
from typing import Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

CellKind = Literal["code", "markdown"]

MARKDOWN_OPEN = 'md"""'
MARKDOWN_CLOSE = '"""'
NOTEBOOK_SUFFIX = ".py"


class NotebookSource(BaseModel):
    """Raw notebook text together with where it was read from.

    Attributes:
        path: Path of the notebook file
        text: Full UTF-8 file contents
    """

    path: Path
    text: str

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        """Notebook name used for chapter and figure file names."""
        name = self.path.name
        if name.endswith(NOTEBOOK_SUFFIX):
            name = name[: -len(NOTEBOOK_SUFFIX)]
        return name

    @property
    def directory(self) -> Path:
        """Directory cells are executed from ('.' for a bare file name)."""
        return self.path.parent


class RawCell(BaseModel):
    """A cell as recovered from the cell-delimited text, before ordering.

    Attributes:
        id: 36-character cell identifier
        source: Cell source text
        kind: Whether the cell holds code or markdown
        suppress_output: True when the source ends with ';'
    """

    id: str
    source: str
    kind: CellKind
    suppress_output: bool = False

    model_config = ConfigDict(frozen=True)


class Cell(RawCell):
    """A fully resolved notebook cell.

    Attributes:
        code_visible: Whether the code is shown (False when folded)
    """

    code_visible: bool = True

    @property
    def output_visible(self) -> bool:
        return not self.suppress_output

    @property
    def markdown_body(self) -> str:
        """Markdown text with the literal delimiters removed."""
        body = self.source.strip()
        if body.startswith(MARKDOWN_OPEN):
            body = body[len(MARKDOWN_OPEN):]
        if body.endswith(MARKDOWN_CLOSE):
            body = body[: -len(MARKDOWN_CLOSE)]
        return body.strip()


class ParsedNotebook(BaseModel):
    """Complete parsed notebook structure.

    Attributes:
        source: The notebook file this was parsed from
        cells: Cells in storage (file) order
        display_order: Cell ids in the order the author displays them
    """

    source: NotebookSource
    cells: list[Cell] = Field(default_factory=list)
    display_order: list[str] = Field(default_factory=list)

    _index: dict[str, Cell] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        """Build the id lookup table."""
        self._index = {cell.id: cell for cell in self.cells}

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def directory(self) -> Path:
        return self.source.directory

    def cell(self, cell_id: str) -> Cell:
        """Look up a cell by id.

        Raises:
            KeyError: If no cell has this id
        """
        return self._index[cell_id]

    def ordered_cells(self) -> Iterator[Cell]:
        """Iterate over cells in display order."""
        for cell_id in self.display_order:
            yield self._index[cell_id]

    def code_cells(self) -> list[Cell]:
        """Code cells in display order."""
        return [cell for cell in self.ordered_cells() if cell.kind == "code"]
