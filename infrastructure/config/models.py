"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from domain.tags.config import TagConfig


class OutputFormat(str, Enum):
    """Supported CLI output formats."""

    TEXT = "text"
    JSON = "json"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RunConfig(BaseModel):
    """
    Runtime configuration for the command line tool.
    - Loaded from tagging.yaml (optional), environment and CLI flags
    - Carries the TagConfig handed to every parse/format call
    """

    tagging: TagConfig = Field(default_factory=TagConfig)
    output_format: OutputFormat = Field(default=OutputFormat.TEXT, description="How results are printed.")
    console_level: str = Field(default="WARNING", description="Minimum level for console logging.")
    file_level: str = Field(default="DEBUG", description="Minimum level for file logging.")
    log_file: Path | None = Field(default=None, description="Optional rotating log file.")

    @field_validator("console_level", "file_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level {v!r}. Expected one of {list(LOG_LEVELS)}")
        return level
