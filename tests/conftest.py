"""Shared test fixtures."""
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def fake_window(name: str) -> MagicMock:
    """A libtmux Window stand-in with a single initial pane."""
    window = MagicMock(name=name)
    pane = MagicMock(name=f"{name}.pane0")
    # Every split hands back a fresh pane.
    pane.split.side_effect = lambda **kw: MagicMock(name=f"{name}.split")
    window.panes = [pane]
    return window


@pytest.fixture
def fake_server():
    """A libtmux Server stand-in with no sessions running."""
    server = MagicMock(name="server")
    server.has_session.return_value = False

    session = server.new_session.return_value
    session.windows = [fake_window("window0")]
    session.new_window.side_effect = lambda **kw: fake_window("window")
    return server


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a YAML config into tmp_path and return its path."""

    def _write(text: str, name: str = ".tmuxsetup.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
