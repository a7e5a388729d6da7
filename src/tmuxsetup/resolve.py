"""
resolve.py

Fill in everything a config left out.

Directories are inherited down the tree (session -> window -> pane) and
joined onto the parent's directory when given. The session name falls back
to the last component of the base path. Nothing here looks at the
filesystem or at tmux.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

from .config import PaneSpec, SessionSpec, WindowSpec
from .errors import ConfigurationError


def _under(parent: Path, child: Optional[Path]) -> Path:
    # An absolute child replaces the parent (pathlib join semantics).
    return parent if child is None else parent / child


def _check_name(name: str) -> None:
    # tmux reads "." and ":" in a target as window/pane separators.
    bad = [c for c in ".:" if c in name]
    if bad:
        raise ConfigurationError(
            f"Session name '{name}' contains '{bad[0]}', which tmux does not allow",
            suggestion="set 'name' in the config",
        )


def resolve_pane(pane: PaneSpec, window_root: Path) -> PaneSpec:
    return replace(pane, root=_under(window_root, pane.root))


def resolve_window(window: WindowSpec, session_root: Path) -> WindowSpec:
    root = _under(session_root, window.root)
    return replace(
        window,
        root=root,
        panes=tuple(resolve_pane(p, root) for p in window.panes),
    )


def resolve(partial: SessionSpec, base_path: Path) -> SessionSpec:
    """! @brief Produce a fully resolved SessionSpec.

    After resolution the session has a name, an attach flag and a root, and
    every window and pane has a root. Fields that are already set are kept,
    so resolving a resolved tree again yields the same tree.

    @param partial Session as loaded from the config.
    @param base_path Directory relative roots are resolved against
           (normally the current working directory).
    @return New, fully resolved SessionSpec.
    @throws ConfigurationError if no usable session name can be derived.
    """
    # Anchor on the cwd (no filesystem access) so a second pass is a no-op.
    base_path = Path(base_path).absolute()

    name = partial.name
    if name is None:
        name = base_path.name
        if not name:
            raise ConfigurationError(
                f"Cannot derive a session name from '{base_path}'",
                suggestion="set 'name' in the config",
            )
    _check_name(name)

    root = _under(base_path, partial.root)
    return replace(
        partial,
        name=name,
        root=root,
        attach=True if partial.attach is None else partial.attach,
        windows=tuple(resolve_window(w, root) for w in partial.windows),
    )
