"""Configuration management for notebooktex."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotebookTexConfig(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with NOTEBOOKTEX_
    Example: NOTEBOOKTEX_TEMPLATE=mathbook

    Attributes:
        target_dir: Directory of the generated LaTeX project
        template: LaTeX template used for main.tex
        font_path: Directory with .ttf files to copy into the project
        figure_width: Width passed to includegraphics
        listing_language: lstlisting language of code blocks
        listing_style: lstlisting style of code blocks
        text_max_width: Line width of rendered text outputs
        text_max_length: Maximum container items shown in text outputs
        text_max_string: Maximum string length shown in text outputs
        png_dpi: Resolution of saved raster figures
    """

    # Project Configuration
    target_dir: str = Field(
        default="./build_latex",
        description="Directory where the LaTeX project is created",
    )
    template: Literal["book", "mathbook"] = Field(
        default="book",
        description="LaTeX template for main.tex",
    )
    font_path: Optional[str] = Field(
        default=None,
        description="Directory holding monospace .ttf fonts for listings",
    )

    # Chapter Configuration
    figure_width: str = Field(
        default="0.8\\textwidth",
        description="Width of included figures",
    )
    listing_language: str = Field(
        default="PythonLocal",
        description="lstlisting language for code cells",
    )
    listing_style: str = Field(
        default="python",
        description="lstlisting style for code cells",
    )

    # Output Rendering
    text_max_width: int = Field(
        default=80,
        ge=20,
        description="Line width of text outputs",
    )
    text_max_length: int = Field(
        default=100,
        ge=1,
        description="Maximum number of container items shown",
    )
    text_max_string: int = Field(
        default=1000,
        ge=1,
        description="Maximum characters shown for strings",
    )
    png_dpi: int = Field(
        default=150,
        ge=50,
        le=1200,
        description="Resolution of saved PNG figures",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NOTEBOOKTEX_",
        case_sensitive=False,
        extra="ignore",
    )


# Global config instance (lazy-loaded)
_config: NotebookTexConfig | None = None


def get_config() -> NotebookTexConfig:
    """Get or create the global configuration instance.

    Returns:
        NotebookTexConfig: The configuration object
    """
    global _config
    if _config is None:
        _config = NotebookTexConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
