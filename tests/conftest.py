"""
Pytest configuration and shared fixtures for File Explorer tests
"""

import io
import logging
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from file_explorer.ui.console import ConsoleUI


@pytest.fixture
def sample_tree(tmp_path) -> Path:
    """
    Directory with mixed-case directories and files:

        beta/  Alpha/  zeta.txt  Apple.md  b.bin
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "beta").mkdir()
    (root / "Alpha").mkdir()
    (root / "Alpha" / "inner.txt").write_text("inside\n")
    (root / "zeta.txt").write_text("zeta\n")
    (root / "Apple.md").write_text("# apple\nred\n")
    (root / "b.bin").write_bytes(b"\x00\x01\x02\x03")
    return root


@pytest.fixture
def empty_dir(tmp_path) -> Path:
    """An empty directory"""
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def make_console():
    """Factory for a console fed from a script of input lines"""
    def _make(*lines: str) -> ConsoleUI:
        script = "".join(f"{line}\n" for line in lines)
        return ConsoleUI(stdin=io.StringIO(script), stdout=io.StringIO())
    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove FILE_EXPLORER_* variables inherited from the shell"""
    for key in list(os.environ):
        if key.startswith("FILE_EXPLORER_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_logging():
    """Close handlers installed by dictConfig during a test"""
    root = logging.getLogger()
    app = logging.getLogger("file_explorer")
    root_before = list(root.handlers)
    app_before = list(app.handlers)
    root_level = root.level
    yield
    root.setLevel(root_level)
    app.setLevel(logging.NOTSET)
    app.propagate = True
    for logger, before in ((root, root_before), (app, app_before)):
        for handler in list(logger.handlers):
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
