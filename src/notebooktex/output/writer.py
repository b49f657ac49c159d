"""Writing chapters into a LaTeX project."""

import logging
from pathlib import Path

from notebooktex.project import INCLUDE_MARKER, insert_line_below

logger = logging.getLogger(__name__)


class ChapterWriter:
    """Write chapter files and wire them into main.tex."""

    def write(self, target_dir: Path | str, notebook_name: str, body: str) -> Path:
        """Write a chapter and include it in the book.

        Args:
            target_dir: LaTeX project directory
            notebook_name: Chapter name, used for the .tex file name
            body: Assembled LaTeX chapter body

        Returns:
            Path: Path to written chapter file
        """
        target_dir = Path(target_dir)
        chapter_path = target_dir / "notebooks" / f"{notebook_name}.tex"

        # Ensure parent directory exists
        chapter_path.parent.mkdir(parents=True, exist_ok=True)

        with open(chapter_path, "w", encoding="utf-8") as f:
            f.write(body)

        self.include_chapter(target_dir / "main.tex", notebook_name)
        return chapter_path

    def include_chapter(self, main_tex: Path, notebook_name: str) -> bool:
        """Insert the chapter include below the marker, once.

        Returns:
            bool: True if the include line was added
        """
        include = f"\\include{{./notebooks/{notebook_name}}}"
        content = main_tex.read_text(encoding="utf-8")
        if include in content:
            return False

        line_number = 1
        for i, line in enumerate(content.split("\n"), start=1):
            if line.startswith(INCLUDE_MARKER):
                line_number = i
                break

        insert_line_below(main_tex, include, line_number)
        logger.info("Included %s in %s", notebook_name, main_tex)
        return True
