# src/taskjournal/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_store import JournalStore

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[JournalStore, argparse.Namespace, CommandEmitter], None]
ArgumentsConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    configure: ArgumentsConfigurer | None = None


class CommandRegistry:
    """Subcommand registry used by the CLI entry point (add, remove, list, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgumentsConfigurer | None = None,
    ) -> None:
        key = name.lower()
        if key in self._commands:
            raise ValueError(f"command already registered: {name}")
        self._commands[key] = Command(key, handler, help_text, configure)

    def names(self) -> list[str]:
        return list(self._commands)

    def install(self, subparsers: argparse._SubParsersAction) -> None:
        """Add one subparser per registered command."""
        for cmd in self._commands.values():
            sub = subparsers.add_parser(cmd.name, help=cmd.help_text, description=cmd.help_text)
            if cmd.configure is not None:
                cmd.configure(sub)

    def handle(
        self,
        store: JournalStore,
        args: argparse.Namespace,
        emit: CommandEmitter = print,
    ) -> None:
        name = getattr(args, "command", None)
        cmd = self._commands.get(name or "")
        if cmd is None:
            raise KeyError(f"Unknown command: {name}")
        logger.debug("Dispatching command=%s journal=%s", cmd.name, store.path)
        cmd.handler(store, args, emit)


registry = CommandRegistry()


def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"index must not be negative: {raw!r}")
    return value


# ---- add ----


def _configure_add(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-t", "--task", required=True, help="Task name.")
    parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        metavar="TAG",
        help="Tag to attach (repeatable).",
    )
    parser.add_argument("--notes", default=None, help="Optional free-text notes.")


def cmd_add(store: JournalStore, args: argparse.Namespace, emit: CommandEmitter) -> None:
    store.add(args.task, tags=list(args.tags), notes=args.notes)


# ---- remove ----


def _configure_remove(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("index", type=non_negative_int, help="1-based position shown by `list`.")


def cmd_remove(store: JournalStore, args: argparse.Namespace, emit: CommandEmitter) -> None:
    store.remove(args.index)


# ---- list ----


def _configure_list(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--tag", default=None, help="Only show tasks carrying exactly this tag.")


def cmd_list(store: JournalStore, args: argparse.Namespace, emit: CommandEmitter) -> None:
    store.list(tag=args.tag, emit=emit)


# ---- clear ----


def cmd_clear(store: JournalStore, args: argparse.Namespace, emit: CommandEmitter) -> None:
    store.clear()


registry.register("add", cmd_add, help_text="Write a task to the journal file.", configure=_configure_add)
registry.register(
    "remove",
    cmd_remove,
    help_text="Remove an entry from the journal file by position.",
    configure=_configure_remove,
)
registry.register(
    "list",
    cmd_list,
    help_text="List tasks in the journal file.",
    configure=_configure_list,
)
registry.register("clear", cmd_clear, help_text="Remove every task from the journal file.")
