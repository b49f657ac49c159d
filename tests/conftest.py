"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Iterable, Optional

import pytest

from notebooktex.config import reset_config

PROJECT_ID = "00000000-0000-0000-0000-000000000001"
MANIFEST_ID = "00000000-0000-0000-0000-000000000002"

HEADER = "### A Pluto.jl notebook ###\n# v0.19.40\n\nusing Markdown\nusing InteractiveUtils\n\n"


def cell_id(n: int) -> str:
    """A 36-character cell id that is unique per n."""
    return f"{n:08d}-aaaa-bbbb-cccc-dddddddddddd"


def build_notebook(
    cells: list[tuple[str, str]],
    order: Optional[list[str]] = None,
    folded: Iterable[str] = (),
    include_order: bool = True,
) -> str:
    """Serialize cells into the cell-delimited notebook format.

    Args:
        cells: (id, source) pairs in storage order
        order: Display order of ids (storage order if None)
        folded: Ids whose code is folded
        include_order: Write the trailing 'Cell order:' block
    """
    folded = set(folded)
    parts = [HEADER]
    for cid, source in cells:
        parts.append(f"# ╔═╡ {cid}\n{source}\n\n")
    parts.append(f'# ╔═╡ {PROJECT_ID}\nPLUTO_PROJECT_TOML_CONTENTS = """\n"""\n\n')
    parts.append(f'# ╔═╡ {MANIFEST_ID}\nPLUTO_MANIFEST_TOML_CONTENTS = """\n"""\n')
    if include_order:
        parts.append("\n# ╔═╡ Cell order:\n")
        for cid in order if order is not None else [c for c, _ in cells]:
            marker = "╟─" if cid in folded else "╠═"
            parts.append(f"# {marker}{cid}\n")
        parts.append(f"# ╠═{PROJECT_ID}\n")
        parts.append(f"# ╠═{MANIFEST_ID}\n")
    return "".join(parts)


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def write_notebook(tmp_path):
    """Write a notebook file into tmp_path and return its path."""

    def _write(cells, name: str = "chapter", **kwargs) -> Path:
        path = tmp_path / f"{name}.py"
        path.write_text(build_notebook(cells, **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_cells():
    """Markdown title, a hidden-output assignment and a visible expression."""
    return [
        (cell_id(1), 'md"""\n# Title\n"""'),
        (cell_id(2), "x = 40;"),
        (cell_id(3), "x + 2"),
    ]
