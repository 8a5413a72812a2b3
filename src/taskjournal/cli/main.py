# src/taskjournal/cli/main.py

"""
CLI entrypoint.

Parses arguments, loads settings, initializes logging, then runs exactly one
journal command. Expected failures (bad index, unreadable journal, I/O errors)
are reported on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..cli.bootstrap import create_store
from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_models import JournalDecodeError
from ..tasks.task_store import InvalidTaskIndexError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskjournal",
        description="Keep a personal to-do journal in a JSON file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-j",
        "--journal_file",
        "--journal-file",
        dest="journal_file",
        metavar="FILE",
        default=None,
        help="Journal file to use (default: $TASKJOURNAL_JOURNAL_FILE or todo.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    registry.install(subparsers)
    return parser


def _console_level(level_name: str, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.WARNING)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    settings = get_settings()
    setup_logging(
        log_dir=settings.log_dir,
        console_level=_console_level(settings.log_level, args.verbose),
    )
    logger.debug("Starting %s command=%s", settings.app_name, args.command)

    store = create_store(settings=settings, journal_file=args.journal_file)

    try:
        registry.handle(store, args, emit=print)
    except (InvalidTaskIndexError, JournalDecodeError, OSError) as e:
        logger.debug("Command %s failed.", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
