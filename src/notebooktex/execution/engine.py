"""Re-execution of notebook code cells in display order."""

import ast
import contextlib
import logging
import textwrap
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from notebooktex import EvaluationError
from notebooktex.execution.evaluator import EvaluationScope, Evaluator, PythonEvaluator
from notebooktex.models import Cell, EvaluatedResult

logger = logging.getLogger(__name__)

# Calls that display a local image file instead of producing a value
IMAGE_EMBED_CALLS = frozenset(
    {
        "LocalResource",
        "PlutoUI.LocalResource",
        "display.Image",
        "IPython.display.Image",
    }
)
IMAGE_PATH_KEYWORDS = ("filename", "path")


@dataclass
class ImageEmbed:
    """An image-embedding call found at the end of a cell.

    Exactly one of path and path_source is set. prelude is the source of
    the statements before the call.
    """

    prelude: str
    path: Optional[str] = None
    path_source: Optional[str] = None


def _dotted_name(node: ast.expr) -> Optional[str]:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        parent = _dotted_name(node.value)
        return f"{parent}.{node.attr}" if parent else None
    return None


def find_image_embed(source: str) -> Optional[ImageEmbed]:
    """Detect a cell whose final statement embeds a local image.

    Args:
        source: Cell source

    Returns:
        Optional[ImageEmbed]: The embed details, or None for ordinary cells
    """
    text = textwrap.dedent(source).strip()
    if not any(name.rsplit(".", 1)[-1] in text for name in IMAGE_EMBED_CALLS):
        return None
    try:
        tree = ast.parse(text)
    except SyntaxError:
        # Left to the evaluator, which reports it as a cell failure
        return None
    if not tree.body:
        return None

    last = tree.body[-1]
    if not (isinstance(last, ast.Expr) and isinstance(last.value, ast.Call)):
        return None
    call = last.value
    if _dotted_name(call.func) not in IMAGE_EMBED_CALLS:
        return None

    argument: Optional[ast.expr] = call.args[0] if call.args else None
    if argument is None:
        for keyword in call.keywords:
            if keyword.arg in IMAGE_PATH_KEYWORDS:
                argument = keyword.value
                break
    if argument is None:
        return None

    prelude = ast.unparse(ast.Module(body=tree.body[:-1], type_ignores=[]))
    if isinstance(argument, ast.Constant) and isinstance(argument.value, str):
        return ImageEmbed(prelude=prelude, path=argument.value)
    return ImageEmbed(prelude=prelude, path_source=ast.unparse(argument))


class ExecutionEngine:
    """Execute code cells one after another in a single scope.

    Cells run with the notebook directory as working directory so relative
    paths resolve as they did for the author.
    """

    def __init__(self, evaluator: Evaluator | None = None):
        self.evaluator = evaluator or PythonEvaluator()

    def run(
        self,
        cells: Iterable[Cell],
        scope: EvaluationScope,
        workdir: Path | str = ".",
    ) -> list[EvaluatedResult]:
        """Execute all code cells and collect their results.

        Args:
            cells: Cells in display order
            scope: Scope shared by every cell of this run
            workdir: Directory to execute from

        Returns:
            list[EvaluatedResult]: One result per code cell

        Raises:
            EvaluationError: If any cell raises
        """
        return list(self.iter_run(cells, scope, workdir))

    def iter_run(
        self,
        cells: Iterable[Cell],
        scope: EvaluationScope,
        workdir: Path | str = ".",
    ) -> Iterator[EvaluatedResult]:
        """Lazily execute code cells, yielding each result as it is produced.

        The working directory stays switched until the iterator is exhausted
        or closed.
        """
        with contextlib.chdir(workdir):
            for cell in cells:
                if cell.kind != "code":
                    continue
                yield self.execute(cell, scope)

    def execute(self, cell: Cell, scope: EvaluationScope) -> EvaluatedResult:
        """Execute one code cell.

        Raises:
            EvaluationError: If the cell raises
        """
        logger.debug("Executing cell %s", cell.id)
        try:
            embed = find_image_embed(cell.source)
            if embed is not None:
                return EvaluatedResult(
                    cell_id=cell.id, image_path=self._resolve_image(cell, embed, scope)
                )
            value = self.evaluator.evaluate(cell.source, scope, filename=f"<cell {cell.id}>")
        except (Exception, SystemExit) as e:
            raise EvaluationError(cell.id, f"{type(e).__name__}: {e}") from e
        return EvaluatedResult(cell_id=cell.id, value=value)

    def _resolve_image(self, cell: Cell, embed: ImageEmbed, scope: EvaluationScope) -> str:
        if embed.path is not None:
            path = embed.path
        else:
            filename = f"<cell {cell.id}>"
            if embed.prelude.strip():
                self.evaluator.evaluate(embed.prelude, scope, filename=filename)
            path = str(self.evaluator.evaluate(embed.path_source, scope, filename=filename))
        return str(Path.cwd() / path)
