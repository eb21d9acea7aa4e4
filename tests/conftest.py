"""Shared fixtures."""

import logging
import os

import platformdirs
import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep ConfigLoader away from real user, cwd and environment configs."""
    user_dir = tmp_path / "user_config"
    user_dir.mkdir()
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *args, **kwargs: str(user_dir))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in list(os.environ):
        if key.startswith("PAIREDSCAN_"):
            monkeypatch.delenv(key)
    return user_dir
