"""notebooktex - Convert reactive notebooks into LaTeX book chapters.

Re-executes every code cell, keeps the author's cell order and visibility,
and extracts figures next to the generated chapter.
"""

__version__ = "0.1.0"


class NotebookTexError(Exception):
    """Base exception for all notebooktex errors."""

    pass


class NotebookParseError(NotebookTexError):
    """Raised when a notebook file cannot be read."""

    pass


class MalformedNotebookError(NotebookParseError):
    """Raised when a notebook does not follow the cell-delimited layout."""

    pass


class EvaluationError(NotebookTexError):
    """Raised when a code cell fails during re-execution."""

    def __init__(self, cell_id: str, message: str):
        self.cell_id = cell_id
        super().__init__(f"Cell {cell_id} failed: {message}")


class FontDirectoryNotFoundError(NotebookTexError, FileNotFoundError):
    """Raised when the font directory to copy from does not exist."""

    pass


class UnsupportedExtensionError(NotebookTexError):
    """Raised when the notebook file extension is not recognised."""

    pass


class UnsupportedFormatError(NotebookTexError):
    """Raised for notebook formats that are recognised but not implemented."""

    pass
