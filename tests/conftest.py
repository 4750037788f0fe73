"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from choicemenu.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_choicemenu_dir(temp_dir, monkeypatch):
    """Point CHOICEMENU_DIR at a temp dir and clear other overrides."""
    import os

    for key in list(os.environ):
        if key.startswith("CHOICEMENU_"):
            monkeypatch.delenv(key)
    data_dir = temp_dir / ".choicemenu"
    data_dir.mkdir()
    monkeypatch.setenv("CHOICEMENU_DIR", str(data_dir))
    reload_config()
    yield data_dir
    reload_config()
