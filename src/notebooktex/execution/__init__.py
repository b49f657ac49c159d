"""Cell re-execution."""

from notebooktex.execution.engine import ExecutionEngine, find_image_embed
from notebooktex.execution.evaluator import EvaluationScope, Evaluator, PythonEvaluator

__all__ = [
    "EvaluationScope",
    "Evaluator",
    "ExecutionEngine",
    "PythonEvaluator",
    "find_image_embed",
]
