"""Build tmux sessions from a declarative YAML description."""

from .config import PaneSpec, SessionSpec, Split, WindowSpec, load_config
from .errors import ConfigurationError, ExecutionError, TmuxSetupError
from .generate import generate
from .resolve import resolve

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ExecutionError",
    "PaneSpec",
    "SessionSpec",
    "Split",
    "TmuxSetupError",
    "WindowSpec",
    "generate",
    "load_config",
    "resolve",
]
