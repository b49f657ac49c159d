"""Evaluation of cell source inside a persistent scope."""

import ast
import builtins
import textwrap
from typing import Any, Protocol


class EvaluationScope:
    """Namespace shared by all cells of one conversion run.

    Bindings only accumulate; a new scope is created for every run.
    """

    def __init__(self, name: str = "__notebook__"):
        self.namespace: dict[str, Any] = {
            "__name__": name,
            "__builtins__": builtins,
        }

    def __contains__(self, key: str) -> bool:
        return key in self.namespace

    def __getitem__(self, key: str) -> Any:
        return self.namespace[key]

    def bindings(self) -> list[str]:
        """Names bound by executed cells."""
        return [key for key in self.namespace if not key.startswith("__")]


class Evaluator(Protocol):
    """Runs cell source and returns the value it produces."""

    def evaluate(self, source: str, scope: EvaluationScope, filename: str = "<cell>") -> Any:
        ...


class PythonEvaluator:
    """Evaluate Python source with REPL semantics.

    The source is parsed as one block. If the final statement is an
    expression its value is returned, otherwise None.
    """

    def evaluate(self, source: str, scope: EvaluationScope, filename: str = "<cell>") -> Any:
        tree = ast.parse(textwrap.dedent(source).strip(), filename=filename, mode="exec")
        if not tree.body:
            return None

        last = tree.body[-1]
        if not isinstance(last, ast.Expr):
            exec(compile(tree, filename, "exec"), scope.namespace)
            return None

        body = ast.Module(body=tree.body[:-1], type_ignores=[])
        exec(compile(body, filename, "exec"), scope.namespace)
        expression = ast.Expression(body=last.value)
        return eval(compile(expression, filename, "eval"), scope.namespace)
