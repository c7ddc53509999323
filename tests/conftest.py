"""Shared fixtures for tempy tests."""

import pytest

from tempy import config


@pytest.fixture(autouse=True)
def temp_root(tmp_path, monkeypatch):
    """Point the root temporary directory at a per-test directory."""
    root = tmp_path / "root"
    root.mkdir()
    monkeypatch.setattr(config, "root_temporary_directory", str(root))
    return root
