"""Parsing of cell-delimited reactive notebooks."""

from notebooktex.parsing.notebook import NotebookParser
from notebooktex.parsing.order import OrderResolver
from notebooktex.parsing.tokenizer import CellTokenizer

__all__ = ["CellTokenizer", "NotebookParser", "OrderResolver"]
