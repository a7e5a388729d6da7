"""Tests for rendering operations as tmux command lines."""
from pathlib import Path

import pytest

from tmuxsetup.operations import (
    AttachSession,
    CreateSession,
    NewWindow,
    Orientation,
    PaneHandle,
    RenameWindow,
    SelectLayout,
    SelectPane,
    SendKeys,
    SetPaneDirectory,
    SplitWindow,
    WindowHandle,
    sh_quote,
)

W0 = WindowHandle(serial=0, session="proj", index=0)
P0 = PaneHandle(serial=1, window=W0, index=0)
P1 = PaneHandle(serial=2, window=W0, index=1)
W1 = WindowHandle(serial=3, session="proj", index=1)
P2 = PaneHandle(serial=4, window=W1, index=0)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", "''"),
        ("/home/u/proj", "/home/u/proj"),
        ("two words", "'two words'"),
        ("it's", "'it'\"'\"'s'"),
    ],
)
def test_sh_quote(value, expected):
    assert sh_quote(value) == expected


def test_targets():
    assert W0.target == "proj:0"
    assert P1.target == "proj:0.1"
    assert P2.target == "proj:1.0"


def test_handles_are_identities():
    """Handles with the same index but different serials are distinct."""
    assert WindowHandle(serial=7, session="proj", index=0) != W0
    assert len({W0, P0, P1, W1, P2}) == 5


@pytest.mark.parametrize(
    "op, line",
    [
        (
            CreateSession(name="proj", start_dir=Path("/src/proj"), window=W0, pane=P0),
            "tmux new-session -d -s proj -c /src/proj",
        ),
        (
            NewWindow(window=W1, pane=P2, start_dir=Path("/src/proj/api")),
            "tmux new-window -d -t proj:1 -c /src/proj/api",
        ),
        (RenameWindow(window=W1, name="api"), "tmux rename-window -t proj:1 api"),
        (
            SetPaneDirectory(pane=P2, directory=Path("/src/my proj")),
            "tmux send-keys -t proj:1.0 'cd '\"'\"'/src/my proj'\"'\"'' Enter",
        ),
        (
            SplitWindow(
                window=W0, source=P0, pane=P1,
                orientation=Orientation.SIDE_BY_SIDE, start_dir=Path("/src/proj"),
            ),
            "tmux split-window -d -t proj:0.0 -h -c /src/proj",
        ),
        (SendKeys(pane=P1, keys="cargo watch"), "tmux send-keys -t proj:0.1 'cargo watch' Enter"),
        (SelectLayout(window=W0), "tmux select-layout -t proj:0 -E"),
        (SelectLayout(window=W0, layout="tiled"), "tmux select-layout -t proj:0 tiled"),
        (SelectPane(window=W0, pane=P0), "tmux select-window -t proj:0 ';' select-pane -t proj:0.0"),
        (AttachSession(name="proj"), "tmux attach-session -t proj"),
    ],
)
def test_command_line(op, line):
    assert op.command_line() == line


def test_set_pane_directory_keys():
    assert SetPaneDirectory(pane=P0, directory=Path("/a b")).keys == "cd '/a b'"


def test_orientation_flags():
    assert Orientation.SIDE_BY_SIDE.flag == "-h"
    assert Orientation.STACKED.flag == "-v"
