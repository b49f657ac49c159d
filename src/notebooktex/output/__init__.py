"""Output classification, chapter assembly and writing."""

from notebooktex.output.assembler import DocumentAssembler
from notebooktex.output.classifier import OutputClassifier
from notebooktex.output.markdown import markdown_to_latex
from notebooktex.output.writer import ChapterWriter

__all__ = ["ChapterWriter", "DocumentAssembler", "OutputClassifier", "markdown_to_latex"]
