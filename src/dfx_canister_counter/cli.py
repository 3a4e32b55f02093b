"""Command-line entry point: ``dfx-canister-counter`` / ``python -m dfx_canister_counter``."""

from __future__ import annotations

import argparse
import os
import sys
from typing import IO, Sequence

from . import __version__
from .analyzer import Analysis, analyze_canisters
from .config import DEFAULT_PROJECT_DIR, ENV_LOG_LEVEL, ENV_PATH
from .errors import CounterError, IoError, ParseError, SchemaError
from .logging_config import get_logger, setup_logging
from .reader import read_document, resolve_config_path

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO = 1
EXIT_PARSE = 2
EXIT_SCHEMA = 3
EXIT_FAILURE = 4  # any other CounterError

_EXIT_CODES = (
    (IoError, EXIT_IO),
    (ParseError, EXIT_PARSE),
    (SchemaError, EXIT_SCHEMA),
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _show_canisters(analysis: Analysis, dest: IO[str]) -> None:
    """Print one line per canister, in document order."""
    for info in analysis.canisters:
        print(f"Canister: {info.name}, Type: {info.type_name}", file=dest)


def _show_summary(analysis: Analysis, dest: IO[str]) -> None:
    print(f"\nTotal number of canisters: {analysis.total}", file=dest)
    print("\nCanister types summary:", file=dest)
    if not analysis.by_type:
        print("  (no canisters defined)", file=dest)
        return
    for type_name, count in analysis.sorted_types():
        print(f"  {type_name}: {count}", file=dest)


def render_report(analysis: Analysis, dest: IO[str], quiet: bool = False) -> None:
    if not quiet:
        _show_canisters(analysis, dest)
    _show_summary(analysis, dest)


def _exit_code(exc: CounterError) -> int:
    for error_type, code in _EXIT_CODES:
        if isinstance(exc, error_type):
            return code
    return EXIT_FAILURE


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfx-canister-counter",
        description="Count the canisters defined in a dfx.json and summarize their types.",
    )
    parser.add_argument(
        "-p",
        "--path",
        default=os.environ.get(ENV_PATH, DEFAULT_PROJECT_DIR),
        help=f"project directory or dfx.json file (default: current directory, or ${ENV_PATH})",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only print the totals, not each canister",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"logging level (default: ${ENV_LOG_LEVEL} or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Sequence[str] | None = None, dest: IO[str] | None = None,
        err: IO[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    dest = dest or sys.stdout
    err = err or sys.stderr
    setup_logging(args.log_level)

    config_path = resolve_config_path(args.path)
    try:
        doc = read_document(config_path)
        analysis = analyze_canisters(doc)
    except CounterError as exc:
        logger.debug("Analysis of %s failed", config_path, exc_info=True)
        print(f"error: {exc}", file=err)
        return _exit_code(exc)

    logger.info("Found %d canister(s) in %s", analysis.total, config_path)
    render_report(analysis, dest, quiet=args.quiet)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
