"""
config.py

Session description model and the YAML loader that builds it.

A config file describes one tmux session:

    name: myproject
    root: backend
    window:
      - name: editor
        pane:
          - command: vim
          - split: horizontal
            command: cargo watch

Every field is optional. A field that is absent stays ``None`` so the
resolver can tell "not given" (inherit / default) apart from an explicit
empty string or ``false``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ".tmuxsetup.yaml"


class Split(enum.Enum):
    """Orientation requested for the split that creates a pane."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Split":
        """! @brief Map a config value onto a Split.

        Only ``horizontal`` and ``vertical`` (any case) are recognised;
        everything else, including ``None``, is UNSPECIFIED.
        """
        if isinstance(value, str):
            v = value.strip().lower()
            if v == cls.HORIZONTAL.value:
                return cls.HORIZONTAL
            if v == cls.VERTICAL.value:
                return cls.VERTICAL
        return cls.UNSPECIFIED


@dataclass(frozen=True)
class PaneSpec:
    root: Optional[Path] = None
    command: Optional[str] = None
    split: Split = Split.UNSPECIFIED


@dataclass(frozen=True)
class WindowSpec:
    name: Optional[str] = None
    root: Optional[Path] = None
    layout: Optional[str] = None
    panes: Tuple[PaneSpec, ...] = ()


@dataclass(frozen=True)
class SessionSpec:
    name: Optional[str] = None
    root: Optional[Path] = None
    attach: Optional[bool] = None
    pre_window: Optional[str] = None
    windows: Tuple[WindowSpec, ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(data: Any) -> "SessionSpec":
        """! @brief Build a partial SessionSpec from already-parsed data.

        @param data Mapping as produced by ``yaml.safe_load``. ``None`` is
               treated as an empty document.
        @return Partial (unresolved) SessionSpec.
        @throws ConfigurationError on structurally invalid input.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a mapping at the top level, got {type(data).__name__}"
            )

        attach = data.get("attach")
        if attach is not None and not isinstance(attach, bool):
            raise ConfigurationError(f"'attach' must be true or false, got {attach!r}")

        windows = [
            _window_from_dict(w, i)
            for i, w in enumerate(_block_list(data, "window", "windows", "config"))
        ]
        return SessionSpec(
            name=_optional_str(data, "name", "config"),
            root=_optional_path(data, "root", "config"),
            attach=attach,
            pre_window=_optional_str(data, "pre_window", "config"),
            windows=tuple(windows),
        )

    @staticmethod
    def from_yaml(path: Path) -> "SessionSpec":
        """! @brief Load a partial SessionSpec from a YAML file.

        @param path Path to the YAML config.
        @return Partial (unresolved) SessionSpec.
        @throws ConfigurationError if the file cannot be read or parsed.
        """
        try:
            text = path.read_text()
        except OSError as e:
            raise ConfigurationError(
                f"Unable to read configuration file {path}: {e.strerror or e}",
                suggestion="pass another file with -c",
            ) from e
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Unable to parse configuration file {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
        return SessionSpec.from_dict(data)


def load_config(path: Path) -> SessionSpec:
    return SessionSpec.from_yaml(Path(path))


# ---------------------------
# Field helpers
# ---------------------------

def _block_list(data: Dict[str, Any], key: str, alias: str, where: str) -> List[Any]:
    """! @brief Fetch a repeatable block (``window`` / ``pane``) as a list.

    The plural spelling is accepted as an alias. A single mapping is taken
    as a one-element block.
    """
    items = data.get(key)
    if items is None:
        items = data.get(alias)
    if items is None:
        return []
    if isinstance(items, dict):
        return [items]
    if not isinstance(items, list):
        raise ConfigurationError(f"'{key}' in {where} must be a list, got {type(items).__name__}")
    return items


def _optional_str(data: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    # YAML turns bare numbers into ints; a window called 1 is still a name.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ConfigurationError(f"'{key}' in {where} must be a string, got {value!r}")
    return value


def _optional_path(data: Dict[str, Any], key: str, where: str) -> Optional[Path]:
    value = _optional_str(data, key, where)
    return Path(value) if value is not None else None


def _window_from_dict(data: Any, index: int) -> WindowSpec:
    where = f"window {index}"
    if data is None:
        return WindowSpec()
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where} must be a mapping, got {data!r}")
    panes = [
        _pane_from_dict(p, f"{where}, pane {j}")
        for j, p in enumerate(_block_list(data, "pane", "panes", where))
    ]
    return WindowSpec(
        name=_optional_str(data, "name", where),
        root=_optional_path(data, "root", where),
        layout=_optional_str(data, "layout", where),
        panes=tuple(panes),
    )


def _pane_from_dict(data: Any, where: str) -> PaneSpec:
    if data is None:
        return PaneSpec()
    if isinstance(data, str):
        # Shorthand: a bare string is the pane's command.
        return PaneSpec(command=data)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where} must be a mapping, got {data!r}")
    return PaneSpec(
        root=_optional_path(data, "root", where),
        command=_optional_str(data, "command", where),
        split=Split.parse(data.get("split")),
    )
