"""
Error types for strkit.

Operations on text are total and never raise for odd data. These errors
signal a caller passing a parameter that has no meaningful interpretation.
"""

from typing import Optional


class StrkitError(Exception):
    """Base exception for all strkit errors."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.argument:
            return f"[{self.argument}] {self.message}"
        return self.message


class InvalidArgumentError(StrkitError, ValueError):
    """Raised when a parameter is outside the domain a function accepts."""

    pass
