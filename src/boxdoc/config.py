"""Configuration management for boxdoc."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from boxdoc.formatting import styles
from boxdoc.formatting.styles import EmphasisStyle

DEFAULT_PAGER_STATUS = "Line %lb [<space>(down), b(ack), h(elp), q(quit)]"


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Emphasis escapes (the same variables color the less pager)
    italic: str = Field(default=styles.ITALIC, alias="LESS_TERMCAP_so")
    bold: str = Field(default=styles.BOLD, alias="LESS_TERMCAP_md")
    bold_italic: str = Field(default=styles.BOLD_ITALIC, alias="LESS_TERMCAP_mb")
    underline: str = Field(default=styles.UNDERLINE, alias="LESS_TERMCAP_us")
    reset: str = Field(default=styles.RESET, alias="LESS_TERMCAP_me")

    # Layout defaults
    width: int = Field(default=80, alias="BOXDOC_WIDTH")
    indent: int = Field(default=0, alias="BOXDOC_INDENT")

    # Status line shown at the bottom of the pager
    pager_status: str = Field(
        default=DEFAULT_PAGER_STATUS,
        alias="BOXDOC_PAGER_STATUS",
    )

    def emphasis_style(self) -> EmphasisStyle:
        """Build the emphasis escapes for the formatter."""
        return EmphasisStyle(
            italic=self.italic,
            bold=self.bold,
            bold_italic=self.bold_italic,
            underline=self.underline,
            reset=self.reset,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
