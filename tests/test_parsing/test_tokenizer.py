"""Tests for cell tokenization."""

import pytest

from conftest import build_notebook, cell_id
from notebooktex import MalformedNotebookError
from notebooktex.parsing.tokenizer import CellTokenizer


class TestCellTokenizer:
    """Tests for CellTokenizer class."""

    def test_tokenize_keeps_storage_order(self, sample_cells):
        """Test cells come back in file order with their ids."""
        text = build_notebook(sample_cells, order=[cell_id(3), cell_id(1), cell_id(2)])

        cells = CellTokenizer().tokenize(text)

        assert [c.id for c in cells] == [cell_id(1), cell_id(2), cell_id(3)]

    def test_tokenize_extracts_source(self):
        """Test the source is the segment text after the id line."""
        text = build_notebook([(cell_id(1), "y = 1\ny * 2")])

        (cell,) = CellTokenizer().tokenize(text)

        assert cell.source.strip() == "y = 1\ny * 2"
        assert cell.id not in cell.source

    def test_tokenize_excludes_environment_cells(self, sample_cells):
        """Test header, environment cells and order block are not cells."""
        cells = CellTokenizer().tokenize(build_notebook(sample_cells))

        assert len(cells) == 3
        assert all("PLUTO_" not in c.source for c in cells)

    def test_markdown_kind(self, sample_cells):
        """Test md triple-quoted cells are markdown, others code."""
        cells = CellTokenizer().tokenize(build_notebook(sample_cells))

        assert [c.kind for c in cells] == ["markdown", "code", "code"]

    def test_single_quoted_md_is_code(self):
        """Test only the triple-quoted literal marks markdown."""
        (cell,) = CellTokenizer().tokenize(build_notebook([(cell_id(1), 'md"text"')]))

        assert cell.kind == "code"

    @pytest.mark.parametrize(
        "source, suppressed",
        [
            ("x = 1;", True),
            ("x = 1;   \n", True),
            ("x = 1", False),
            ("x = 1; y = 2", False),
        ],
    )
    def test_suppress_output(self, source, suppressed):
        """Test a trailing semicolon suppresses output."""
        (cell,) = CellTokenizer().tokenize(build_notebook([(cell_id(1), source)]))

        assert cell.suppress_output is suppressed

    def test_empty_notebook(self):
        """Test a notebook without cells tokenizes to nothing."""
        assert CellTokenizer().tokenize(build_notebook([])) == []

    def test_too_few_segments(self):
        """Test text without the fixed layout is malformed."""
        with pytest.raises(MalformedNotebookError, match="at least 4"):
            CellTokenizer().tokenize("### A Pluto.jl notebook ###\nx = 1\n")

    def test_missing_order_block(self, sample_cells):
        """Test a notebook without its order block is malformed."""
        text = build_notebook(sample_cells, include_order=False)

        with pytest.raises(MalformedNotebookError, match="Cell order"):
            CellTokenizer().tokenize(text)

    def test_duplicate_ids(self):
        """Test two cells with the same id are malformed."""
        text = build_notebook([(cell_id(1), "a = 1"), (cell_id(1), "b = 2")])

        with pytest.raises(MalformedNotebookError, match=cell_id(1)):
            CellTokenizer().tokenize(text)

    def test_short_id(self):
        """Test an id shorter than 36 characters is malformed."""
        text = build_notebook([("abc", "a = 1")], order=[])

        with pytest.raises(MalformedNotebookError, match="invalid id"):
            CellTokenizer().tokenize(text)
