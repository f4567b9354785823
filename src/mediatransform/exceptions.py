from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    CONFIG = "config"
    RUNTIME = "runtime"


DEFAULT_EXIT_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.RUNTIME: 1,
    ErrorCategory.INVALID_ARGUMENT: 2,
    ErrorCategory.CONFIG: 3,
}


@dataclass
class MediaTransformError(Exception):
    """
    Base exception for request construction and configuration failures.

    The category decides the CLI exit code and the label printed before
    the message.
    """

    message: str
    category: ErrorCategory = ErrorCategory.RUNTIME
    exit_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.exit_code is None:
            self.exit_code = DEFAULT_EXIT_CODES.get(self.category, 1)

    def label(self) -> str:
        return {
            ErrorCategory.INVALID_ARGUMENT: "Invalid argument",
            ErrorCategory.CONFIG: "Configuration error",
            ErrorCategory.RUNTIME: "Runtime error",
        }.get(self.category, "Error")


class InvalidArgumentError(MediaTransformError, ValueError):
    """
    Raised synchronously when a request field receives a value outside its
    domain, e.g. an audio MIME type passed as the video codec or an unknown
    HDR mode. The builder keeps its previous state.
    """

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.INVALID_ARGUMENT,
            exit_code=exit_code,
        )


class ConfigurationError(MediaTransformError):
    """Raised when MEDIATRANSFORM_ settings cannot be loaded or turned into a request."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIG,
            exit_code=exit_code,
        )
