"""Data models for executed cells and their classified outputs."""

from dataclasses import dataclass
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict

OutputKind = Literal["none", "text", "plot", "image"]


@dataclass
class EvaluatedResult:
    """Value produced by one code cell.

    image_path is only set when the cell embeds a local image, in which
    case value is unused.
    """

    cell_id: str
    value: Any = None
    image_path: Optional[str] = None


class OutputArtifact(BaseModel):
    """Classified output of a code cell.

    Attributes:
        kind: none, text, plot or image
        payload: Rendered text, figure file name, or image path
    """

    kind: OutputKind
    payload: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def none(cls) -> "OutputArtifact":
        return cls(kind="none")

    @classmethod
    def text(cls, rendered: str) -> "OutputArtifact":
        return cls(kind="text", payload=rendered)

    @classmethod
    def plot(cls, filename: str) -> "OutputArtifact":
        return cls(kind="plot", payload=filename)

    @classmethod
    def image(cls, path: str) -> "OutputArtifact":
        return cls(kind="image", payload=path)


@dataclass
class FigureCounter:
    """Monotonic figure index, one per conversion run."""

    value: int = 0

    def next(self) -> int:
        self.value += 1
        return self.value
