"""Tests for LaTeX project scaffolding and chapter writing."""

import pytest

from notebooktex import FontDirectoryNotFoundError, NotebookTexError
from notebooktex.output.writer import ChapterWriter
from notebooktex.project import (
    INCLUDE_MARKER,
    PROJECT_DIRS,
    ProjectScaffolder,
    insert_line_below,
)


@pytest.fixture
def project(tmp_path):
    return ProjectScaffolder().create_project(tmp_path / "book")


class TestProjectScaffolder:
    """Tests for ProjectScaffolder class."""

    def test_creates_structure(self, project):
        """Test the project layout is created."""
        for name in PROJECT_DIRS:
            assert (project / name).is_dir()
        for name in ("main.tex", "python_listings.tex", "python_font.tex", "appendix.tex", "ref.bib"):
            assert (project / name).is_file()
        assert (project / "frontmatter" / "titlepage.tex").is_file()

    def test_main_has_include_marker(self, project):
        """Test main.tex carries the chapter include marker."""
        main = (project / "main.tex").read_text(encoding="utf-8")

        assert INCLUDE_MARKER in main
        assert "\\input{python_listings}" in main
        assert "\\input{python_font}" in main

    def test_mathbook_template(self, tmp_path):
        """Test the math template adds theorem support."""
        project = ProjectScaffolder().create_project(tmp_path / "math", template="mathbook")
        main = (project / "main.tex").read_text(encoding="utf-8")

        assert "listoftheorems" in main
        assert INCLUDE_MARKER in main

    def test_unknown_template(self, tmp_path):
        """Test unknown templates are rejected."""
        with pytest.raises(ValueError, match="Unknown template"):
            ProjectScaffolder().create_project(tmp_path, template="article")

    def test_existing_files_not_overwritten(self, project):
        """Test scaffolding an existing project keeps edited files."""
        main = project / "main.tex"
        main.write_text("edited", encoding="utf-8")

        ProjectScaffolder().create_project(project)

        assert main.read_text(encoding="utf-8") == "edited"

    def test_copies_fonts(self, tmp_path):
        """Test fonts are copied and the font file names them."""
        fonts = tmp_path / "fonts_src"
        fonts.mkdir()
        for name in ("Mono-Regular.ttf", "Mono-Bold.ttf", "Mono-BoldItalic.ttf", "README.txt"):
            (fonts / name).write_bytes(b"font")

        project = ProjectScaffolder().create_project(tmp_path / "book", font_path=fonts)
        font_tex = (project / "python_font.tex").read_text(encoding="utf-8")

        assert sorted(p.name for p in (project / "fonts").iterdir()) == [
            "Mono-Bold.ttf",
            "Mono-BoldItalic.ttf",
            "Mono-Regular.ttf",
        ]
        assert "\\setmonofont{Mono-Regular}" in font_tex
        assert "BoldFont = Mono-Bold," in font_tex

    def test_missing_font_dir(self, tmp_path):
        """Test a missing font directory is reported."""
        with pytest.raises(FontDirectoryNotFoundError, match="Font directory not found") as exc_info:
            ProjectScaffolder().create_project(tmp_path / "book", font_path=tmp_path / "nope")

        assert isinstance(exc_info.value, NotebookTexError)
        assert isinstance(exc_info.value, FileNotFoundError)


class TestInsertLineBelow:
    """Tests for insert_line_below."""

    def test_inserts_below_line(self, tmp_path):
        """Test the text lands on the following line."""
        path = tmp_path / "f.tex"
        path.write_text("a\nb\n", encoding="utf-8")

        insert_line_below(path, "new", 1)

        assert path.read_text(encoding="utf-8") == "a\nnew\nb\n"

    def test_past_end_appends(self, tmp_path):
        """Test a line number past the end appends."""
        path = tmp_path / "f.tex"
        path.write_text("a", encoding="utf-8")

        insert_line_below(path, "new", 5)

        assert path.read_text(encoding="utf-8") == "a\nnew"


class TestChapterWriter:
    """Tests for ChapterWriter class."""

    def test_writes_chapter(self, project):
        """Test the chapter lands in notebooks/ and is included."""
        path = ChapterWriter().write(project, "intro", "\\newpage\n")

        assert path == project / "notebooks" / "intro.tex"
        assert path.read_text(encoding="utf-8") == "\\newpage\n"
        lines = (project / "main.tex").read_text(encoding="utf-8").split("\n")
        marker = next(i for i, line in enumerate(lines) if line.startswith(INCLUDE_MARKER))
        assert lines[marker + 1] == "\\include{./notebooks/intro}"

    def test_include_added_once(self, project):
        """Test repeated writes do not duplicate the include."""
        writer = ChapterWriter()
        writer.write(project, "intro", "one")

        assert writer.include_chapter(project / "main.tex", "intro") is False
        writer.write(project, "intro", "two")

        main = (project / "main.tex").read_text(encoding="utf-8")
        assert main.count("\\include{./notebooks/intro}") == 1
        assert (project / "notebooks" / "intro.tex").read_text(encoding="utf-8") == "two"

    def test_newest_chapter_first(self, project):
        """Test each new include goes directly below the marker."""
        writer = ChapterWriter()
        writer.write(project, "first", "")
        writer.write(project, "second", "")

        main = (project / "main.tex").read_text(encoding="utf-8")
        assert main.index("notebooks/second") < main.index("notebooks/first")

    def test_no_marker_inserts_after_first_line(self, tmp_path):
        """Test a main.tex without marker gets the include on line 2."""
        main = tmp_path / "main.tex"
        main.write_text("\\documentclass{book}\n\\begin{document}\n", encoding="utf-8")

        assert ChapterWriter().include_chapter(main, "x") is True
        assert main.read_text(encoding="utf-8").split("\n")[1] == "\\include{./notebooks/x}"
