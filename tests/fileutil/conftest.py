"""Shared fixtures for file utility tests."""

import logging
import os

import pytest


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep ConfigLoader away from real user, system and env configuration."""
    user_dir = tmp_path / "user_config"
    work_dir = tmp_path / "work"
    work_dir.mkdir()

    monkeypatch.setattr(
        "dfget.common.config.platformdirs.user_config_dir",
        lambda *args, **kwargs: str(user_dir)
    )
    monkeypatch.setattr(
        "dfget.common.config.ConfigLoader._load_system_config",
        lambda self: None
    )
    monkeypatch.chdir(work_dir)
    for key in list(os.environ):
        if key.startswith("DFGET_FILEUTIL_"):
            monkeypatch.delenv(key)

    return work_dir


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
