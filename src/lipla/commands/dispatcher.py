"""
Execution of resolved interpreter commands against a life plan.

The dispatcher receives one input line at a time. Most lines complete in a
single step; ``add`` and ``update`` without an inline description instead
leave the dispatcher awaiting a description, and the following lines are
taken as that description until a non-empty one arrives or the pending
operation is cancelled.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from lipla.commands.help import HELP_TABLE, help_for
from lipla.commands.validation import validate_arity, validate_target
from lipla.core.path_utils import parse_path, unquote
from lipla.core.plan import Plan
from lipla.core.types import Command, Item
from lipla.exceptions.core import (
    LiplaError,
    NothingToShowError,
    UnknownCommandError,
)
from lipla.logging import get_logger
from lipla.parsing.resolver import Resolution, resolve

logger = get_logger(__name__)

MAIN_PROMPT = "Lipla> "
DESCRIPTION_PROMPT = "Description (Ctrl-C to abort): "

ITEM_COLORS = {
    Item.GOAL: "cyan",
    Item.ACTION: "yellow",
    Item.AGREEMENT: "green",
    Item.ALERT: "red",
    Item.RESULT: "blue",
}

SHOW_HEADER = ["=====================", "Item(Id): Description", "====================="]


class Outcome(Enum):
    """What the interpreter loop should do after a line."""

    CONTINUE = "continue"
    AWAITING_DESCRIPTION = "awaiting_description"
    EXIT_SAVE = "exit_save"
    EXIT_NO_SAVE = "exit_no_save"


class History(Protocol):
    """Interpreter history as seen by the dispatcher."""

    def add(self, line: str) -> None: ...

    def clear(self) -> None: ...


@dataclass
class PendingDescription:
    """An add or update waiting for its description."""

    command: Command
    item: Item
    indices: list[int] = field(default_factory=list)
    prefill: str = ""


class Dispatcher:
    """Runs interpreter commands against a life plan.

    Params:
        plan: The life plan to operate on; owned by the interpreter loop
        console: Where listings and notices are printed
        history: Optional interpreter history, cleared by ``erase``
    """

    def __init__(self, plan: Plan, console: Console, history: History | None = None):
        self.plan = plan
        self.console = console
        self.history = history
        self.pending: PendingDescription | None = None
        self._handlers = {
            Command.ADD: self._add,
            Command.UPDATE: self._update,
            Command.REMOVE: self._remove,
            Command.SHOW: self._show,
            Command.HELP: self._help,
            Command.CLEAR: self._clear,
            Command.ERASE: self._erase,
            Command.EXIT_SAVE: lambda resolution: Outcome.EXIT_SAVE,
            Command.EXIT_NO_SAVE: lambda resolution: Outcome.EXIT_NO_SAVE,
        }

    @property
    def prompt(self) -> str:
        """The prompt for the next line."""
        return DESCRIPTION_PROMPT if self.pending else MAIN_PROMPT

    @property
    def prefill(self) -> str:
        """Text to pre-load into the edit buffer for the next line."""
        return self.pending.prefill if self.pending else ""

    def feed(self, line: str) -> Outcome:
        """
        Process one line of input.

        Params:
            line: The line as typed, without the trailing newline

        Returns:
            What the interpreter loop should do next
        """
        if self.pending:
            return self._resume(line)
        return self.execute(line)

    def cancel(self) -> Outcome:
        """Drop a pending add or update without touching the plan."""
        if self.pending:
            logger.debug("Cancelled pending %s %s", self.pending.command.value, self.pending.item.value)
        self.pending = None
        return Outcome.CONTINUE

    def execute(self, line: str) -> Outcome:
        """Resolve and run one command line, reporting any error as a notice."""
        if not line.strip():
            return Outcome.CONTINUE
        resolution = resolve(line)
        logger.debug(
            "Resolved %r to %s %s (consumed %d)",
            line,
            resolution.command.value,
            resolution.item.value if resolution.item else "-",
            resolution.consumed,
        )
        if resolution.command is not Command.ERASE and self.history is not None:
            self.history.add(line.strip())
        try:
            return self.dispatch(resolution)
        except LiplaError as e:
            self.error(str(e))
            return Outcome.CONTINUE

    def dispatch(self, resolution: Resolution) -> Outcome:
        """
        Run a resolved command.

        Raises:
            LiplaError: Any parse, arity, reference, capacity or vocabulary error
        """
        if not resolution.is_complete:
            raise UnknownCommandError(resolution.offending_words)
        return self._handlers[resolution.command](resolution)

    def error(self, message: str) -> None:
        """Print a single-line error notice."""
        self.console.print(f"[red]error[/red] {escape(message)}", highlight=False)

    def _record_item(self, resolution: Resolution) -> Item:
        if not resolution.item.is_record:
            raise UnknownCommandError(resolution.offending_words)
        return resolution.item

    def _add(self, resolution: Resolution) -> Outcome:
        item = self._record_item(resolution)
        parsed = parse_path(resolution.remainder)
        validate_arity(Command.ADD, item, parsed)
        validate_target(self.plan, Command.ADD, item, parsed.indices)
        if not parsed.description:
            self.pending = PendingDescription(Command.ADD, item, parsed.indices)
            return Outcome.AWAITING_DESCRIPTION
        self.plan.add(item, parsed.indices, parsed.description)
        logger.debug("Added %s under %s", item.value, parsed.numbers)
        return Outcome.CONTINUE

    def _update(self, resolution: Resolution) -> Outcome:
        item = self._record_item(resolution)
        parsed = parse_path(resolution.remainder)
        validate_arity(Command.UPDATE, item, parsed)
        validate_target(self.plan, Command.UPDATE, item, parsed.indices)
        if not parsed.description:
            current = self.plan.node(item, parsed.indices).description
            self.pending = PendingDescription(Command.UPDATE, item, parsed.indices, current)
            return Outcome.AWAITING_DESCRIPTION
        self.plan.update(item, parsed.indices, parsed.description)
        logger.debug("Updated %s %s", item.value, parsed.numbers)
        return Outcome.CONTINUE

    def _remove(self, resolution: Resolution) -> Outcome:
        item = self._record_item(resolution)
        parsed = parse_path(resolution.remainder)
        validate_arity(Command.REMOVE, item, parsed)
        validate_target(self.plan, Command.REMOVE, item, parsed.indices)
        self.plan.remove(item, parsed.indices)
        logger.debug("Removed %s %s", item.value, parsed.numbers)
        return Outcome.CONTINUE

    def _resume(self, line: str) -> Outcome:
        description = unquote(line)
        if not description:
            return Outcome.AWAITING_DESCRIPTION
        pending, self.pending = self.pending, None
        try:
            validate_target(self.plan, pending.command, pending.item, pending.indices)
            if pending.command is Command.ADD:
                self.plan.add(pending.item, pending.indices, description)
            else:
                self.plan.update(pending.item, pending.indices, description)
        except LiplaError as e:
            self.error(str(e))
        return Outcome.CONTINUE

    def _show(self, resolution: Resolution) -> Outcome:
        item = resolution.item
        if self.plan.count(item) == 0:
            raise NothingToShowError(item)
        for line in SHOW_HEADER:
            self.console.print(line, highlight=False)
        for kind, path, node in self.plan.walk():
            if item is Item.ALL or item is kind:
                self.console.print(
                    self._format_record(kind, path, node.description, indent=item is Item.ALL),
                    highlight=False,
                )
        return Outcome.CONTINUE

    @staticmethod
    def _format_record(kind: Item, path: tuple[int, ...], description: str, indent: bool) -> str:
        color = ITEM_COLORS[kind]
        numbers = ".".join(
            f"[{ITEM_COLORS[level]}]{index + 1}[/{ITEM_COLORS[level]}]"
            for level, index in zip(kind.lineage, path)
        )
        prefix = " " * (kind.depth - 1) if indent else ""
        label = kind.value.capitalize()
        return f"{prefix}[{color}]{label}[/{color}]({numbers}): {escape(description)}"

    def _help(self, resolution: Resolution) -> Outcome:
        target = resolution.target
        if target is None:
            for line in HELP_TABLE:
                self.console.print(line, highlight=False)
            return Outcome.CONTINUE
        entry = help_for(target.command, target.item)
        if entry is None:
            words = " ".join(target.words[:2])
            self.console.print(
                f"[red]error[/red] No help for [yellow]{escape(words)}[/yellow]",
                highlight=False,
            )
            return Outcome.CONTINUE
        self.console.print(
            f"Command [yellow]{entry.name}[/yellow]: {entry.summary}", highlight=False
        )
        if entry.usage:
            self.console.print(f"Usage: [yellow]{escape(entry.usage)}[/yellow]", highlight=False)
        return Outcome.CONTINUE

    def _clear(self, resolution: Resolution) -> Outcome:
        self.console.clear()
        return Outcome.CONTINUE

    def _erase(self, resolution: Resolution) -> Outcome:
        if self.history is not None:
            self.history.clear()
        return Outcome.CONTINUE
