"""
errors.py

Exception hierarchy for tmuxsetup.

Configuration problems surface before anything touches tmux; execution
problems surface on the first tmux invocation that fails.
"""

from __future__ import annotations

from typing import Any, Optional


class TmuxSetupError(Exception):
    """! @brief Base exception for all tmuxsetup errors.

    @param message Human readable description.
    @param suggestion Optional hint shown after the message.
    """

    def __init__(self, message: str, suggestion: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigurationError(TmuxSetupError):
    """Configuration file is missing, malformed or cannot be resolved."""


class ExecutionError(TmuxSetupError):
    """! @brief A tmux invocation failed.

    @param operation The operation that was being issued, if any.
    """

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        operation: Any = None,
    ) -> None:
        super().__init__(message, suggestion)
        self.operation = operation
