"""Ordered, append-only aggregation of failures.

``ErrorList`` collects independently occurring failures into one exception
that reads like a single failure: ``str()`` joins the members with newlines.

The handle an accumulating loop carries is ``ErrorList | None``, where
``None`` means "no failures yet". The module-level functions accept ``None``
everywhere and treat it as the empty collection, so callers never need a
presence check:

    errs = None
    for path in paths:
        try:
            path.read_bytes()
        except OSError as exc:
            errs = add_error(errs, exc)
    if num(errs):
        print(error_text(errs))

Empty messages and ``None`` failures are ignored silently by every
constructor and append operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from errlist.logging import get_logger
from errlist.types import Failure, StringError

logger = get_logger(__name__)


@dataclass
class _ErrNode:
    """One record in the chain."""

    error: Failure
    next: Optional[_ErrNode] = None


class ErrorList(Exception):
    """Exception holding an ordered list of failures.

    Build instances with ``new_string``/``new_error`` or by appending to
    ``None``. A list always holds at least one failure; ``err()`` collapses a
    one-element list to its only member.
    """

    def __init__(self, first: Failure) -> None:
        super().__init__()
        self._head = _ErrNode(first)
        self._tail = self._head
        self._num = 1

    def _append(self, error: Failure) -> None:
        node = _ErrNode(error)
        self._tail.next = node
        self._tail = node
        self._num += 1

    def add_string(self, message: str) -> ErrorList:
        """Append a ``StringError`` built from message; empty text is ignored."""
        if message == "":
            logger.debug("Ignoring empty message for list of %d", self._num)
            return self
        self._append(StringError(message))
        return self

    def add_error(self, error: Optional[Failure]) -> ErrorList:
        """Append error; ``None`` is ignored.

        Appending a list to itself appends a copy of its current members, so
        the chain never contains itself. Indirect cycles are not detected.
        """
        if error is None:
            logger.debug("Ignoring None error for list of %d", self._num)
            return self
        if error is self:
            error = _rebuild(self.slice())
        self._append(error)
        return self

    def num(self) -> int:
        return self._num

    def slice(self) -> List[Failure]:
        """Return the failures in insertion order as a new list."""
        out: List[Failure] = []
        node = self._head
        while node is not None:
            out.append(node.error)
            node = node.next
        return out

    def err(self) -> Failure:
        """Return the only failure if there is one, else this list."""
        if self._num == 1:
            return self._head.error
        return self

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.slice())

    def __len__(self) -> int:
        return self._num

    def __iter__(self) -> Iterator[Failure]:
        return iter(self.slice())

    def __repr__(self) -> str:
        return f"ErrorList({self.slice()!r})"

    def __reduce__(self):
        return (_rebuild, (self.slice(),))


def _rebuild(failures: List[Failure]) -> ErrorList:
    """Build a new list holding failures in order."""
    errs = ErrorList(failures[0])
    for failure in failures[1:]:
        errs._append(failure)
    return errs


def new_string(message: str) -> Optional[ErrorList]:
    """Start a list with a ``StringError`` built from message.

    Args:
        message: Failure text.

    Returns:
        A new one-element list, or ``None`` when message is empty.
    """
    if message == "":
        return None
    logger.debug("Starting error list from message")
    return ErrorList(StringError(message))


def new_error(error: Optional[Failure]) -> Optional[ErrorList]:
    """Start a list with error, or return ``None`` when error is ``None``."""
    if error is None:
        return None
    logger.debug("Starting error list from %s", type(error).__name__)
    return ErrorList(error)


def add_string(errs: Optional[ErrorList], message: str) -> Optional[ErrorList]:
    """Append a failure built from message to errs.

    Args:
        errs: Existing list, or ``None`` for an empty one.
        message: Failure text. Empty text appends nothing.

    Returns:
        errs itself when it was not ``None``; otherwise ``new_string(message)``.
    """
    if errs is None:
        return new_string(message)
    return errs.add_string(message)


def add_error(
    errs: Optional[ErrorList], error: Optional[Failure]
) -> Optional[ErrorList]:
    """Append error to errs.

    Args:
        errs: Existing list, or ``None`` for an empty one.
        error: Failure to append. ``None`` appends nothing.

    Returns:
        errs itself when it was not ``None``; otherwise ``new_error(error)``.
    """
    if errs is None:
        return new_error(error)
    return errs.add_error(error)


def num(errs: Optional[ErrorList]) -> int:
    """Return the number of failures in errs (0 for ``None``)."""
    if errs is None:
        return 0
    return errs.num()


def error_text(errs: Optional[ErrorList]) -> str:
    """Return the failures' text joined by newlines ("" for ``None``)."""
    if errs is None:
        return ""
    return str(errs)


def to_list(errs: Optional[ErrorList]) -> List[Failure]:
    """Return the failures in insertion order as a new list ([] for ``None``)."""
    if errs is None:
        return []
    return errs.slice()


def err(errs: Optional[ErrorList]) -> Optional[Failure]:
    """Collapse errs to a single failure.

    Returns:
        ``None`` for an empty list, the member itself for a one-element list,
        and errs for anything longer.
    """
    if errs is None:
        return None
    return errs.err()


def check(errs: Optional[ErrorList]) -> None:
    """Raise ``err(errs)`` if any failure was collected.

    Raises:
        BaseException: The single collected failure, or the ``ErrorList``
            when there is more than one.
    """
    error = err(errs)
    if error is not None:
        raise error
