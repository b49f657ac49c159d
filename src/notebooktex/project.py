"""LaTeX project scaffolding for generated books."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from notebooktex import FontDirectoryNotFoundError
from notebooktex.templates import (
    APPENDIX,
    COPYRIGHT,
    DEFAULT_FONT,
    FONT_TEMPLATE,
    INCLUDE_MARKER,
    MAIN_TEMPLATES,
    PYTHON_LISTINGS,
    REFERENCES,
    TITLEPAGE,
)

logger = logging.getLogger(__name__)

PROJECT_DIRS = ("notebooks", "figures", "frontmatter", "fonts")

__all__ = ["INCLUDE_MARKER", "ProjectScaffolder", "insert_line_below"]


def insert_line_below(path: Path | str, line: str, line_number: int) -> None:
    """Insert a literal line below a 1-based line number of a text file.

    Args:
        path: File to edit
        line: Text to insert (without newline)
        line_number: Line the new text goes below; past the end appends
    """
    path = Path(path)
    lines = path.read_text(encoding="utf-8").split("\n")
    lines.insert(min(line_number, len(lines)), line)
    path.write_text("\n".join(lines), encoding="utf-8")


class ProjectScaffolder:
    """Create the LaTeX book project chapters are written into.

    Project structure:
    {target_dir}/
        ├── main.tex              # Book, includes every chapter
        ├── notebooks/            # One .tex per notebook
        ├── figures/              # Saved plots
        ├── frontmatter/          # Title page and copyright
        ├── fonts/                # Optional listing fonts
        ├── python_listings.tex
        ├── python_font.tex
        ├── appendix.tex
        └── ref.bib

    Existing files are never overwritten, so chapters already included in
    main.tex survive later conversions.
    """

    def create_project(
        self,
        target_dir: Path | str,
        template: str = "book",
        font_path: Optional[Path | str] = None,
    ) -> Path:
        """Create (or complete) a LaTeX project.

        Args:
            target_dir: Project directory, created if missing
            template: main.tex template, 'book' or 'mathbook'
            font_path: Directory of .ttf fonts to copy into fonts/

        Returns:
            Path: The project directory

        Raises:
            ValueError: If the template is unknown
            FontDirectoryNotFoundError: If font_path does not exist
        """
        if template not in MAIN_TEMPLATES:
            raise ValueError(
                f"Unknown template: {template}. Choose from {', '.join(MAIN_TEMPLATES)}"
            )

        target_dir = Path(target_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        for name in PROJECT_DIRS:
            (target_dir / name).mkdir(exist_ok=True)

        self._write_once(target_dir / "main.tex", MAIN_TEMPLATES[template])
        self._write_once(target_dir / "python_listings.tex", PYTHON_LISTINGS)
        self._write_once(target_dir / "frontmatter" / "titlepage.tex", TITLEPAGE)
        self._write_once(target_dir / "frontmatter" / "copyright.tex", COPYRIGHT)
        self._write_once(target_dir / "appendix.tex", APPENDIX)
        self._write_once(target_dir / "ref.bib", REFERENCES)

        if font_path is not None:
            self._write_font(target_dir, self.copy_fonts(font_path, target_dir / "fonts"))
        else:
            self._write_once(target_dir / "python_font.tex", DEFAULT_FONT)

        return target_dir

    def copy_fonts(self, font_path: Path | str, fonts_dir: Path) -> list[Path]:
        """Copy .ttf files into the project's fonts directory.

        Returns:
            list[Path]: Copied font files
        """
        font_path = Path(font_path)
        if not font_path.is_dir():
            raise FontDirectoryNotFoundError(f"Font directory not found: {font_path}")

        copied = []
        for font in sorted(font_path.glob("*.ttf")):
            dest = fonts_dir / font.name
            shutil.copy2(font, dest)
            copied.append(dest)
        logger.info("Copied %d font file(s) from %s", len(copied), font_path)
        return copied

    def _write_font(self, target_dir: Path, fonts: list[Path]) -> None:
        font_tex = target_dir / "python_font.tex"
        if not fonts:
            self._write_once(font_tex, DEFAULT_FONT)
            return

        stems = [font.stem for font in fonts]
        regular = next((s for s in stems if "regular" in s.lower()), stems[0])
        bold = next(
            (s for s in stems if "bold" in s.lower() and "italic" not in s.lower()), None
        )
        options = f"    BoldFont = {bold},\n" if bold else ""
        # Fonts are an explicit request, so this file is refreshed
        font_tex.write_text(FONT_TEMPLATE % (regular, options), encoding="utf-8")

    def _write_once(self, path: Path, content: str) -> None:
        if path.exists():
            return
        path.write_text(content, encoding="utf-8")
        logger.debug("Created %s", path)
