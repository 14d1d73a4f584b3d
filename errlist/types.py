"""Failure value types shared across errlist.

A failure is any exception object. ``ErrorList`` accepts failures of any
exception type and only ever asks them for ``str()``.
"""

from __future__ import annotations

#: The failure-value capability: anything that renders itself via ``str()``.
Failure = BaseException


class StringError(Exception):
    """Failure built from a plain message.

    ``str()`` returns the message exactly as given.

    Attributes:
        message: The text this failure was created from.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"StringError({self.message!r})"
