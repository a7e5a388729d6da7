"""
generate.py

Turn a resolved SessionSpec into the ordered list of tmux operations that
builds it.

The first window is the one tmux creates together with the session; each
later window gets an explicit NewWindow. Inside a window the first pane is
the window's initial pane and every further pane is split off the pane
declared before it. Handles for windows and panes are handed out as the
operations that create them are emitted, so nothing is targeted before it
exists.
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .config import PaneSpec, SessionSpec, Split, WindowSpec
from .errors import ConfigurationError
from .operations import (
    AttachSession,
    CreateSession,
    NewWindow,
    Operation,
    Orientation,
    PaneHandle,
    RenameWindow,
    SelectLayout,
    SelectPane,
    SendKeys,
    SetPaneDirectory,
    SplitWindow,
    WindowHandle,
)

# UNSPECIFIED follows tmux's own split-window default (stacked).
ORIENTATIONS = {
    Split.HORIZONTAL: Orientation.SIDE_BY_SIDE,
    Split.VERTICAL: Orientation.STACKED,
    Split.UNSPECIFIED: Orientation.STACKED,
}


class _Handles:
    """Hands out window and pane handles in creation order."""

    def __init__(self, session: str, base_index: int, pane_base_index: int) -> None:
        self.session = session
        self.base_index = base_index
        self.pane_base_index = pane_base_index
        self._serial: Iterator[int] = itertools.count()
        self._windows = 0
        self._panes: Dict[WindowHandle, int] = {}

    def window(self) -> WindowHandle:
        handle = WindowHandle(
            serial=next(self._serial),
            session=self.session,
            index=self.base_index + self._windows,
        )
        self._windows += 1
        self._panes[handle] = 0
        return handle

    def pane(self, window: WindowHandle) -> PaneHandle:
        # Splits always act on the newest pane, so tmux appends the new one.
        handle = PaneHandle(
            serial=next(self._serial),
            window=window,
            index=self.pane_base_index + self._panes[window],
        )
        self._panes[window] += 1
        return handle


def _pane_keys(ops: List[Operation], tree: SessionSpec, pane: PaneSpec, target: PaneHandle) -> None:
    if tree.pre_window is not None:
        ops.append(SendKeys(pane=target, keys=tree.pre_window))
    if pane.command is not None:
        ops.append(SendKeys(pane=target, keys=pane.command))


def _window_ops(
    ops: List[Operation],
    tree: SessionSpec,
    window: WindowSpec,
    handle: WindowHandle,
    first: PaneHandle,
    created_in: Path,
    handles: _Handles,
) -> None:
    if window.name is not None:
        ops.append(RenameWindow(window=handle, name=window.name))

    panes = window.panes or (PaneSpec(root=window.root),)
    previous: Optional[PaneHandle] = None
    for pane in panes:
        if previous is None:
            target = first
            if pane.root != created_in:
                ops.append(SetPaneDirectory(pane=target, directory=pane.root))
        else:
            target = handles.pane(handle)
            ops.append(SplitWindow(
                window=handle,
                source=previous,
                pane=target,
                orientation=ORIENTATIONS[pane.split],
                start_dir=pane.root,
            ))
        _pane_keys(ops, tree, pane, target)
        previous = target

    if len(panes) > 1:
        ops.append(SelectLayout(window=handle, layout=window.layout))


def generate(tree: SessionSpec, base_index: int = 0, pane_base_index: int = 0) -> List[Operation]:
    """! @brief Build the operation sequence for a resolved session.

    @param tree Resolved SessionSpec (see resolve.resolve). It is only read.
    @param base_index tmux ``base-index``; numbering of the first window.
    @param pane_base_index tmux ``pane-base-index``; numbering of the first pane.
    @return Operations in the order they must be issued. The first is always
            CreateSession; the last is AttachSession when the session attaches.
    @throws ConfigurationError if the tree has not been resolved.
    """
    if tree.name is None or tree.root is None:
        raise ConfigurationError(
            "Session is not resolved", suggestion="pass it through resolve() first"
        )

    handles = _Handles(tree.name, base_index, pane_base_index)
    first_window = handles.window()
    first_pane = handles.pane(first_window)
    ops: List[Operation] = [
        CreateSession(
            name=tree.name,
            start_dir=tree.root,
            window=first_window,
            pane=first_pane,
        )
    ]

    for i, window in enumerate(tree.windows):
        if i == 0:
            handle, first, created_in = first_window, first_pane, tree.root
        else:
            handle = handles.window()
            first = handles.pane(handle)
            created_in = window.root
            ops.append(NewWindow(window=handle, pane=first, start_dir=window.root))
        _window_ops(ops, tree, window, handle, first, created_in, handles)

    if tree.windows:
        ops.append(SelectPane(window=first_window, pane=first_pane))
    if tree.attach:
        ops.append(AttachSession(name=tree.name))
    return ops
