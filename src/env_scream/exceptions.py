"""
Exception types for env-scream.
"""

from __future__ import annotations

from typing import Any


class EnvScreamError(Exception):
    """Base class for env-scream errors, carrying a code and debug context."""

    def __init__(self, message: str, error_code: str | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": dict(self.context),
        }


class LogFileNotFoundError(EnvScreamError):
    """The log file to analyze does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Log file not found: {path}", error_code="LOG_FILE_NOT_FOUND", path=path
        )
        self.path = path


__all__ = ["EnvScreamError", "LogFileNotFoundError"]
