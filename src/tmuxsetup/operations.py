"""
operations.py

The abstract tmux operations produced by the generator.

Windows and panes are named by handles. A handle is created by the
operation that brings its window or pane into existence and is only an
identity: the executor keeps its own table from handle to the live libtmux
object. The ``index`` a handle carries is a best guess of tmux's numbering
and is used for nothing but rendering command lines (``--dry-run``).
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


def sh_quote(s: str) -> str:
    """! @brief Quote a string for POSIX-ish shell consumption.

    @param s Input string.
    @return Shell-safe quoted string.
    """
    if s == "":
        return "''"
    if re.fullmatch(r"[A-Za-z0-9_./:@%+-]+", s):
        return s
    return "'" + s.replace("'", "'\"'\"'") + "'"


class Orientation(enum.Enum):
    """How a split lays out the new pane next to its source pane."""

    SIDE_BY_SIDE = "-h"
    STACKED = "-v"

    @property
    def flag(self) -> str:
        return self.value


# ---------------------------
# Handles
# ---------------------------

@dataclass(frozen=True)
class WindowHandle:
    serial: int
    session: str
    index: int

    @property
    def target(self) -> str:
        return f"{self.session}:{self.index}"


@dataclass(frozen=True)
class PaneHandle:
    serial: int
    window: WindowHandle
    index: int

    @property
    def target(self) -> str:
        return f"{self.window.target}.{self.index}"


# ---------------------------
# Operations
# ---------------------------

class Operation:
    """Base class for a single tmux step."""

    def tmux_args(self) -> List[str]:
        """! @brief Arguments of the equivalent ``tmux`` invocation."""
        raise NotImplementedError

    def command_line(self) -> str:
        return " ".join(sh_quote(a) for a in ["tmux", *self.tmux_args()])


@dataclass(frozen=True)
class CreateSession(Operation):
    name: str
    start_dir: Path
    window: WindowHandle
    pane: PaneHandle

    def tmux_args(self) -> List[str]:
        return ["new-session", "-d", "-s", self.name, "-c", str(self.start_dir)]


@dataclass(frozen=True)
class NewWindow(Operation):
    window: WindowHandle
    pane: PaneHandle
    start_dir: Path

    def tmux_args(self) -> List[str]:
        return ["new-window", "-d", "-t", self.window.target, "-c", str(self.start_dir)]


@dataclass(frozen=True)
class RenameWindow(Operation):
    window: WindowHandle
    name: str

    def tmux_args(self) -> List[str]:
        return ["rename-window", "-t", self.window.target, self.name]


@dataclass(frozen=True)
class SetPaneDirectory(Operation):
    pane: PaneHandle
    directory: Path

    @property
    def keys(self) -> str:
        return f"cd {sh_quote(str(self.directory))}"

    def tmux_args(self) -> List[str]:
        return ["send-keys", "-t", self.pane.target, self.keys, "Enter"]


@dataclass(frozen=True)
class SplitWindow(Operation):
    window: WindowHandle
    source: PaneHandle
    pane: PaneHandle
    orientation: Orientation
    start_dir: Path

    def tmux_args(self) -> List[str]:
        return [
            "split-window", "-d",
            "-t", self.source.target,
            self.orientation.flag,
            "-c", str(self.start_dir),
        ]


@dataclass(frozen=True)
class SendKeys(Operation):
    pane: PaneHandle
    keys: str

    def tmux_args(self) -> List[str]:
        return ["send-keys", "-t", self.pane.target, self.keys, "Enter"]


@dataclass(frozen=True)
class SelectLayout(Operation):
    window: WindowHandle
    # None spreads the panes out evenly (select-layout -E)
    layout: Optional[str] = None

    def tmux_args(self) -> List[str]:
        if self.layout is None:
            return ["select-layout", "-t", self.window.target, "-E"]
        return ["select-layout", "-t", self.window.target, self.layout]


@dataclass(frozen=True)
class SelectPane(Operation):
    window: WindowHandle
    pane: PaneHandle

    def tmux_args(self) -> List[str]:
        return [
            "select-window", "-t", self.window.target,
            ";",
            "select-pane", "-t", self.pane.target,
        ]


@dataclass(frozen=True)
class AttachSession(Operation):
    name: str

    def tmux_args(self) -> List[str]:
        return ["attach-session", "-t", self.name]
