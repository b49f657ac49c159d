"""Terminal previews."""

from notebooktex.preview.terminal import NotebookPreview

__all__ = ["NotebookPreview"]
