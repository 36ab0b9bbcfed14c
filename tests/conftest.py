"""Test configuration and fixtures for fm-engine."""

import pytest

from fm_engine.core.config import settings


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_tree(temp_dir):
    """Create ``a/{b.txt, c/{d.txt}}`` under the temp directory."""
    root = temp_dir / "a"
    root.mkdir()
    (root / "b.txt").write_text("content b")
    nested = root / "c"
    nested.mkdir()
    (nested / "d.txt").write_text("content d" * 100)
    return root


@pytest.fixture
def destination(temp_dir):
    """Create an empty destination directory."""
    dst = temp_dir / "dst"
    dst.mkdir()
    return dst


@pytest.fixture
def follow_symlinks(monkeypatch):
    """Enable symlink following for the duration of a test."""
    monkeypatch.setattr(settings, "follow_symlinks", True)
