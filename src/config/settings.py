"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use WSCONVERT_ prefix (e.g., WSCONVERT_EMPHASIS_STYLE=markdown).

Settings can also be loaded from a .env file in the working directory.
Command line flags override these values for a single run.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use WSCONVERT_ prefix.

    Examples:
        WSCONVERT_CHUNK_SIZE=65536
        WSCONVERT_HEADING_MARKER="# "
        WSCONVERT_RESET_WRAPPERS_PER_LINE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="WSCONVERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Input configuration
    chunk_size: int = Field(
        default=8192,
        gt=0,
        description="Number of bytes read per chunk while normalizing 8-bit input",
    )

    # Dot command markers
    heading_marker: str = Field(
        default="## ",
        description="Prefix for header/footer dot commands (.he, .fo)",
    )

    subheading_marker: str = Field(
        default="### ",
        description="Prefix for numbered header/footer dot commands (.h1-.h5, .f1-.f5)",
    )

    rule_marker: str = Field(
        default="---",
        description="Replacement line for page break dot commands (.pa, .xl)",
    )

    # Control character rendering
    page_break: str = Field(
        default="\n---\n",
        description="Replacement text for a form feed control character",
    )

    escape_controls: bool = Field(
        default=True,
        description="Render unknown control characters as ^X escapes instead of passing them through",
    )

    # Emphasis rendering
    emphasis_style: Literal["unicode", "markdown"] = Field(
        default="unicode",
        description="Render emphasis as Unicode styled/combining characters or Markdown wrappers",
    )

    reset_wrappers_per_line: bool = Field(
        default=False,
        description="Close all open emphasis at the start of each line instead of carrying it over",
    )

    # Batch configuration
    input_pattern: str = Field(
        default="**/*.ws",
        description="Glob pattern (relative to inputdir) selecting files for batch conversion",
    )

    output_suffix: str = Field(
        default=".md",
        description="Suffix given to converted files in batch mode",
    )

    def outputPath_make(
        self, source: Path, inputdir: Path, outputdir: Path, suffix: Optional[str] = None
    ) -> Path:
        """
        Map a batch input file to its output path.

        The path relative to inputdir is kept and the suffix replaced.

        Args:
            source: Input file found under inputdir
            inputdir: Root of the input tree
            outputdir: Root of the output tree
            suffix: Replacement suffix (default: output_suffix)

        Returns:
            Output file path under outputdir

        Example:
            >>> settings = AppSettings()
            >>> settings.outputPath_make(Path("/in/a/doc.ws"), Path("/in"), Path("/out"))
            PosixPath('/out/a/doc.md')
        """
        relative = source.relative_to(inputdir)
        return outputdir / relative.with_suffix(suffix or self.output_suffix)


# Singleton instance - import this in your code
appsettings = AppSettings()
