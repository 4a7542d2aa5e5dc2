from __future__ import annotations
from typing import Optional


class FixedLengthParseError(ValueError):
    """
    Raised when a value cannot be read from a fixed-length record.

    :param message: Human readable description, including the full record text.
    :param offset: Cursor position at which the failed read started.
    :param cause: Underlying exception, if any. Also chained as ``__cause__``
        when raised with ``raise ... from``.
    """

    def __init__(self, message: str, offset: int, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.cause = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, offset={self.offset})"


__all__ = ["FixedLengthParseError"]
