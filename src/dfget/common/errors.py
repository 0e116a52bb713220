"""Base error definitions for dfget packages."""

from typing import Any, Dict


class DfgetError(Exception):
    """Base exception for all dfget errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context
