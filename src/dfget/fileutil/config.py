"""Configuration schema for the file utility CLI."""

from pydantic import BaseModel, Field, ConfigDict
from dfget.common import LoggingConfig

from .file_util import BUFFER_SIZE


class TransferConfig(BaseModel):
    """Settings for copying file content."""
    
    model_config = ConfigDict(extra='forbid')
    
    buffer_size: int = Field(
        default=BUFFER_SIZE,
        ge=1,
        description="Bytes read and written per iteration when copying"
    )


class FileUtilConfig(BaseModel):
    """Root configuration for the file utility CLI."""
    
    model_config = ConfigDict(extra='forbid')
    
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    transfer: TransferConfig = Field(default_factory=TransferConfig)
