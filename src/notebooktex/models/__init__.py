"""Data models for notebooktex."""

from notebooktex.models.notebook import (
    Cell,
    CellKind,
    NotebookSource,
    ParsedNotebook,
    RawCell,
)
from notebooktex.models.output import (
    EvaluatedResult,
    FigureCounter,
    OutputArtifact,
    OutputKind,
)

__all__ = [
    "Cell",
    "CellKind",
    "NotebookSource",
    "ParsedNotebook",
    "RawCell",
    "EvaluatedResult",
    "FigureCounter",
    "OutputArtifact",
    "OutputKind",
]
