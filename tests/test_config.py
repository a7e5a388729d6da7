"""Tests for loading session descriptions."""
from pathlib import Path

import pytest

from tmuxsetup.config import PaneSpec, SessionSpec, Split, WindowSpec, load_config
from tmuxsetup.errors import ConfigurationError


def test_full_config(write_config):
    """All fields are read into the model."""
    path = write_config(
        """
name: proj
root: backend
attach: false
pre_window: source .venv/bin/activate
window:
  - name: editor
    root: src
    layout: main-vertical
    pane:
      - command: vim
      - root: tests
        split: horizontal
        command: pytest -f
  - name: logs
"""
    )

    session = load_config(path)

    assert session == SessionSpec(
        name="proj",
        root=Path("backend"),
        attach=False,
        pre_window="source .venv/bin/activate",
        windows=(
            WindowSpec(
                name="editor",
                root=Path("src"),
                layout="main-vertical",
                panes=(
                    PaneSpec(command="vim"),
                    PaneSpec(root=Path("tests"), command="pytest -f", split=Split.HORIZONTAL),
                ),
            ),
            WindowSpec(name="logs"),
        ),
    )


def test_empty_document_is_empty_session(write_config):
    session = load_config(write_config(""))
    assert session == SessionSpec()
    assert session.windows == ()


def test_absent_fields_stay_unset(write_config):
    """Missing keys and YAML nulls are both 'not given'."""
    session = load_config(write_config("name:\nwindow:\n  - pane:\n      - {}\n"))

    assert session.name is None
    assert session.root is None
    assert session.attach is None
    assert session.windows[0].name is None
    assert session.windows[0].panes[0] == PaneSpec()


def test_explicit_empty_values_are_kept(write_config):
    """Empty strings and false are values, not absence."""
    session = load_config(write_config('name: ""\nattach: false\n'))

    assert session.name == ""
    assert session.attach is False


def test_plural_aliases(write_config):
    session = load_config(write_config("windows:\n  - panes:\n      - command: top\n"))
    assert session.windows[0].panes == (PaneSpec(command="top"),)


def test_single_window_mapping(write_config):
    """A lone mapping under 'window' is one window."""
    session = load_config(write_config("window:\n  name: only\n"))
    assert session.windows == (WindowSpec(name="only"),)


def test_pane_string_shorthand(write_config):
    session = load_config(write_config("window:\n  - pane:\n      - htop\n      - make watch\n"))
    assert [p.command for p in session.windows[0].panes] == ["htop", "make watch"]


def test_numeric_window_name_becomes_string(write_config):
    session = load_config(write_config("window:\n  - name: 2024\n"))
    assert session.windows[0].name == "2024"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("horizontal", Split.HORIZONTAL),
        ("Horizontal", Split.HORIZONTAL),
        ("vertical", Split.VERTICAL),
        (" VERTICAL ", Split.VERTICAL),
        ("diagonal", Split.UNSPECIFIED),
        ("", Split.UNSPECIFIED),
        (None, Split.UNSPECIFIED),
        (True, Split.UNSPECIFIED),
    ],
)
def test_split_parse(value, expected):
    assert Split.parse(value) is expected


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("- a\n- b\n", "top level"),
        ("attach: yes please\n", "attach"),
        ("window: 3\n", "'window'"),
        ("window:\n  - 3\n", "window 0"),
        ("window:\n  - pane: nope\n", "'pane' in window 0"),
        ("window:\n  - pane:\n      - [1, 2]\n", "window 0, pane 0"),
        ("window:\n  - name: [a]\n", "'name' in window 0"),
        ("root: {a: 1}\n", "'root'"),
    ],
)
def test_structural_errors(write_config, text, fragment):
    with pytest.raises(ConfigurationError) as excinfo:
        load_config(write_config(text))
    assert fragment in str(excinfo.value)


def test_invalid_yaml(write_config):
    with pytest.raises(ConfigurationError, match="Unable to parse"):
        load_config(write_config("window: [\n"))


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError) as excinfo:
        load_config(tmp_path / "nope.yaml")
    assert "Unable to read" in str(excinfo.value)
    assert "-c" in str(excinfo.value)
