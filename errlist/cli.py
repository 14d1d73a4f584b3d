"""Command-line interface for errlist."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, List, Optional

from errlist.aggregate import (
    ErrorList,
    add_error,
    add_string,
    error_text,
    num,
    to_list,
)
from errlist.config import SCAN_CONFIG, ScanConfig
from errlist.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def _attempt(action: Callable[..., Any], *args: Any) -> Optional[OSError]:
    """Run action and return the ``OSError`` it raised, or ``None``."""
    try:
        action(*args)
    except OSError as exc:
        return exc
    return None


def _open_and_close(path: Path) -> None:
    with open(path, "rb"):
        pass


def _print_listing(errs: Optional[ErrorList], config: ScanConfig) -> None:
    failures = to_list(errs)
    shown = config.max_listed(len(failures))
    for failure in failures[:shown]:
        print(f"  - {failure}")
    hidden = len(failures) - shown
    if hidden > 0:
        print(f"  ... and {hidden} more")


def _scan_paths(
    paths: List[Path],
    as_text: bool = False,
    as_json: bool = False,
    config: ScanConfig = SCAN_CONFIG,
) -> None:
    """Open every path and report the ones that cannot be read.

    Args:
        paths: Files to open for reading.
        as_text: Record failures by message instead of as exception objects.
        as_json: Print a JSON summary instead of the text report.
        config: Listing limits and exit status.

    Raises:
        SystemExit: With ``config.failure_exit_code`` when any path failed.
    """
    logger.info("Scanning %d %s", len(paths), _plural(len(paths), "path"))

    errs: Optional[ErrorList] = None
    for path in paths:
        exc = _attempt(_open_and_close, path)
        if exc is not None:
            logger.debug("Cannot open %s: %s", path, exc)
        if as_text:
            errs = add_string(errs, str(exc) if exc is not None else "")
        else:
            errs = add_error(errs, exc)

    count = num(errs)
    if as_json:
        payload = {
            "count": count,
            "errors": [str(failure) for failure in to_list(errs)],
        }
        print(json.dumps(payload, indent=2))
    else:
        print(f"{count} {_plural(count, 'error')}")
        _print_listing(errs, config)

    if count:
        logger.warning(
            "%d of %d %s failed", count, len(paths), _plural(len(paths), "path")
        )
        raise SystemExit(config.failure_exit_code)
    logger.info("All paths readable")


def _run_demo(output_dir: Optional[Path], config: ScanConfig = SCAN_CONFIG) -> None:
    """Create every other numbered file, then try to open all of them.

    The first half of the files is recorded through ``add_error`` and the
    second half through ``add_string``; successful opens pass ``None`` or an
    empty message, which the list ignores.
    """
    if output_dir is None:
        with tempfile.TemporaryDirectory(prefix="errlist-demo-") as tmp:
            _run_demo(Path(tmp), config)
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    logger.debug("Running demo in %s", output_dir)

    count = config.demo_file_count
    half = count // 2
    errs: Optional[ErrorList] = None

    for i in range(0, count, config.demo_create_step):
        path = output_dir / str(i)
        if not path.exists():
            errs = add_error(errs, _attempt(path.touch))

    for i in range(half):
        errs = add_error(errs, _attempt(_open_and_close, output_dir / str(i)))

    for i in range(half, count):
        exc = _attempt(_open_and_close, output_dir / str(i))
        errs = add_string(errs, str(exc) if exc is not None else "")

    print(f"{num(errs)} {_plural(num(errs), 'error')}")
    print()
    print("Here they are printed directly:")
    print(error_text(errs))
    print()
    print("Here they are printed from a list:")
    for failure in to_list(errs):
        print(failure)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``errlist`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="errlist",
        description="Collect failures from independent file operations.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{scan,demo}",
        help="Available commands",
    )

    scan_parser = subparsers.add_parser(
        "scan", help="Open files and report every one that fails"
    )
    scan_parser.add_argument("paths", type=Path, nargs="+", help="Files to open")
    scan_parser.add_argument(
        "--as-text",
        action="store_true",
        help="Record failures by message instead of as exception objects",
    )
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary to stdout",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Run the numbered-files demonstration"
    )
    demo_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Directory for the numbered files (default: a temporary directory)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "scan":
        _scan_paths(args.paths, as_text=args.as_text, as_json=args.json)
    elif args.command == "demo":
        _run_demo(args.output)


if __name__ == "__main__":
    main()
