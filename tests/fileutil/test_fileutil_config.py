"""Tests for file utility configuration."""

import pytest
from pydantic import ValidationError

from dfget.fileutil import BUFFER_SIZE
from dfget.fileutil.config import FileUtilConfig, TransferConfig


class TestTransferConfig:
    """Tests for TransferConfig."""

    def test_defaults(self):
        """Test that the default buffer matches the library default."""
        config = TransferConfig()

        assert config.buffer_size == BUFFER_SIZE == 8 * 1024 * 1024

    def test_custom_buffer_size(self):
        config = TransferConfig(buffer_size=4096)

        assert config.buffer_size == 4096

    def test_rejects_non_positive_buffer(self):
        """Test that a zero or negative buffer size is rejected."""
        with pytest.raises(ValidationError):
            TransferConfig(buffer_size=0)

        with pytest.raises(ValidationError):
            TransferConfig(buffer_size=-1)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            TransferConfig(chunk_size=10)


class TestFileUtilConfig:
    """Tests for FileUtilConfig (root configuration)."""

    def test_defaults(self):
        """Test root configuration with all defaults."""
        config = FileUtilConfig()

        assert config.logging.level == "INFO"
        assert config.logging.format == "simple"
        assert config.logging.file is None
        assert config.transfer.buffer_size == BUFFER_SIZE

    def test_from_nested_dict(self):
        """Test construction from a dict shaped like a TOML document."""
        config = FileUtilConfig(**{
            "logging": {"level": "debug", "format": "JSON"},
            "transfer": {"buffer_size": 1024},
        })

        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.transfer.buffer_size == 1024

    def test_rejects_unknown_section(self):
        with pytest.raises(ValidationError):
            FileUtilConfig(network={"timeout": 5})
