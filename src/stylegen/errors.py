"""Error types raised while compiling style trees."""

from __future__ import annotations


class StyleError(Exception):
    """Base error for all stylegen errors."""


class InvalidStyleError(StyleError):
    """Raised when a style tree is malformed and cannot be rendered as CSS."""

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        self.path = path
        if path:
            message = f"{message} (at {' -> '.join(path)})"
        super().__init__(message)
