"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from notebooktex.config import NotebookTexConfig, get_config, reset_config


class TestConfig:
    """Tests for NotebookTexConfig."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ("TARGET_DIR", "TEMPLATE", "FONT_PATH"):
            monkeypatch.delenv(f"NOTEBOOKTEX_{name}", raising=False)

        config = NotebookTexConfig(_env_file=None)

        assert config.target_dir == "./build_latex"
        assert config.template == "book"
        assert config.font_path is None
        assert config.figure_width == "0.8\\textwidth"
        assert config.listing_language == "PythonLocal"

    def test_environment_override(self, monkeypatch):
        """Test prefixed environment variables are read."""
        monkeypatch.setenv("NOTEBOOKTEX_PNG_DPI", "300")

        assert NotebookTexConfig(_env_file=None).png_dpi == 300

    def test_invalid_template(self, monkeypatch):
        """Test templates are restricted to the known ones."""
        monkeypatch.setenv("NOTEBOOKTEX_TEMPLATE", "article")

        with pytest.raises(ValidationError):
            NotebookTexConfig(_env_file=None)

    def test_global_instance(self):
        """Test get_config caches until reset."""
        first = get_config()

        assert get_config() is first
        reset_config()
        assert get_config() is not first
