"""Shared logging configuration."""

from typing import Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration shared across dfget packages."""
    
    model_config = ConfigDict(extra='forbid')
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )
    format: Literal["simple", "detailed", "json"] = Field(
        default="simple",
        description="Console log format type"
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path (supports ${USER_LOGS} style variables)"
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        description="Rotate the log file once it grows past this size"
    )
    backup_count: int = Field(
        default=5,
        ge=0,
        description="Number of rotated log files to keep"
    )
    
    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalize log level to uppercase for case-insensitive input."""
        if isinstance(v, str):
            return v.upper()
        return v
    
    @field_validator('format', mode='before')
    @classmethod
    def normalize_format(cls, v: str) -> str:
        """Normalize format to lowercase for case-insensitive input."""
        if isinstance(v, str):
            return v.lower()
        return v
