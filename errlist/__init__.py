"""errlist: ordered aggregation of independent failures.

errlist collects errors raised by a loop of independent operations into one
``ErrorList`` exception. An absent list is ``None``, and every module-level
operation accepts it, so an accumulating loop never needs a presence check.

Primary API:
    new_string(), new_error() - Start a list from text or an exception
    add_string(), add_error() - Append to a list, or start one from ``None``
    num(), error_text(), to_list() - Read the collected failures
    err() - Collapse to ``None``, the single failure, or the list itself
    check() - Raise the collapsed failure if there is one

Example:
    from errlist import add_error, err

    errs = None
    for path in paths:
        try:
            open(path).close()
        except OSError as exc:
            errs = add_error(errs, exc)

    failure = err(errs)
    if failure is not None:
        print(failure)
"""

from __future__ import annotations

from errlist import cli, logging
from errlist._version import __version__
from errlist.aggregate import (
    ErrorList,
    add_error,
    add_string,
    check,
    err,
    error_text,
    new_error,
    new_string,
    num,
    to_list,
)
from errlist.types import Failure, StringError

__all__ = [
    # Version
    "__version__",
    # Types
    "ErrorList",
    "Failure",
    "StringError",
    # Construction
    "new_string",
    "new_error",
    "add_string",
    "add_error",
    # Views
    "num",
    "error_text",
    "to_list",
    "err",
    "check",
    # Utilities
    "cli",
    "logging",
]
