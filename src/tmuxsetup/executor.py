"""
executor.py

Issue generated operations against a real tmux server through libtmux.

Every operation becomes one tmux call, in order. The first failure stops
the run: whatever was already created stays as it is and the error is
raised as ExecutionError. Attaching replaces the current process with
``tmux attach-session``, so it is always the last step.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Optional, Union

import libtmux
from libtmux import exc as tmux_exc
from libtmux.constants import PaneDirection

from .errors import ExecutionError
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

logger = logging.getLogger(__name__)

DIRECTIONS = {
    Orientation.SIDE_BY_SIDE: PaneDirection.Right,
    Orientation.STACKED: PaneDirection.Below,
}


def tmux_server() -> libtmux.Server:
    """! @brief Create a libtmux Server object.

    @return A libtmux.Server instance bound to the default tmux socket.
    """
    return libtmux.Server()


def find_session(server: libtmux.Server, name: str) -> Optional[libtmux.Session]:
    """! @brief Find a tmux session by exact name.

    @param server libtmux server.
    @param name Session name.
    @return Session if found, otherwise None.
    """
    ql = server.sessions.filter(session_name=name)
    return ql[0] if ql else None


class Executor:
    """! @brief Runs an operation list on one tmux server.

    Live libtmux objects are looked up by the handles the generator put on
    the operations; each creating operation registers the objects it made.

    @param server libtmux server; a default one is created when omitted.
    """

    def __init__(self, server: Optional[libtmux.Server] = None) -> None:
        self.server = server if server is not None else tmux_server()
        self.session: Optional[libtmux.Session] = None
        self._objects: Dict[Union[WindowHandle, PaneHandle], object] = {}

    def run(self, operations: Iterable[Operation]) -> None:
        """! @brief Issue all operations in order, stopping at the first failure.

        @param operations Output of generate.generate.
        @throws ExecutionError when tmux rejects an operation or cannot be run.
        """
        for op in operations:
            logger.debug("tmux %s", " ".join(op.tmux_args()))
            try:
                self._apply(op)
            except tmux_exc.TmuxCommandNotFound as e:
                raise ExecutionError(
                    "tmux executable not found", suggestion="install tmux", operation=op
                ) from e
            except (tmux_exc.LibTmuxException, OSError) as e:
                raise ExecutionError(
                    f"tmux failed on '{op.command_line()}': {e}", operation=op
                ) from e

    def kill(self, name: str) -> None:
        """! @brief Kill the session called @p name.

        @throws ExecutionError if there is no such session or tmux fails.
        """
        try:
            sess = find_session(self.server, name)
            if sess is None:
                raise ExecutionError(f"No such session: {name}")
            sess.kill()
        except tmux_exc.LibTmuxException as e:
            raise ExecutionError(f"Error killing session {name}: {e}") from e
        logger.info("Killed session %s", name)

    # ---------------------------
    # Per-operation handlers
    # ---------------------------

    def _window(self, handle: WindowHandle) -> libtmux.Window:
        return self._objects[handle]

    def _pane(self, handle: PaneHandle) -> libtmux.Pane:
        return self._objects[handle]

    def _apply(self, op: Operation) -> None:
        if isinstance(op, CreateSession):
            if self.server.has_session(op.name):
                raise ExecutionError(
                    f"Session '{op.name}' already exists",
                    suggestion="set a unique 'name' in the config",
                    operation=op,
                )
            self.session = self.server.new_session(
                session_name=op.name,
                start_directory=str(op.start_dir),
                attach=False,
            )
            win = self.session.windows[0]
            self._objects[op.window] = win
            self._objects[op.pane] = win.panes[0]
            return

        if isinstance(op, NewWindow):
            if self.session is None:
                raise ExecutionError("No session to add a window to", operation=op)
            win = self.session.new_window(start_directory=str(op.start_dir), attach=False)
            self._objects[op.window] = win
            self._objects[op.pane] = win.panes[0]
            return

        if isinstance(op, RenameWindow):
            self._window(op.window).rename_window(op.name)
            return

        if isinstance(op, SplitWindow):
            self._objects[op.pane] = self._pane(op.source).split(
                direction=DIRECTIONS[op.orientation],
                start_directory=str(op.start_dir),
                attach=False,
            )
            return

        if isinstance(op, (SendKeys, SetPaneDirectory)):
            self._pane(op.pane).send_keys(op.keys, enter=True)
            return

        if isinstance(op, SelectLayout):
            win = self._window(op.window)
            if op.layout is None:
                win.select_layout(spread=True)
            else:
                win.select_layout(op.layout)
            return

        if isinstance(op, SelectPane):
            self._window(op.window).select()
            self._pane(op.pane).select()
            return

        if isinstance(op, AttachSession):
            # Use tmux client attach (more reliable than libtmux attach for terminals)
            logger.info("Attaching to session %s", op.name)
            os.execvp("tmux", ["tmux", *op.tmux_args()])
            return

        raise TypeError(f"Unknown operation: {op!r}")
